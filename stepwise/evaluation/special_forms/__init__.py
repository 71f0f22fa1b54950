"""Registry of special forms for the Stepwise evaluator.

Maps operator names to handlers that see the unevaluated node. The evaluator
consults this table before ordinary function application.
"""

from stepwise.evaluation.special_forms.define_form import define_form

SPECIAL_FORMS = {
    "define": define_form,
}
