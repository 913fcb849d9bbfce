"""Registry of special forms for the Kappa evaluator.

Maps Symbols to handler functions that receive their arguments unevaluated.
The evaluator consults this table before ordinary function application.
Names are upper-case because the reader upper-cases every identifier.
"""

from kappa.types.symbol import Symbol
from kappa.evaluation.special_forms.setq_form import setq_form
from kappa.evaluation.special_forms.defun_form import defun_form

SPECIAL_FORMS = {
    Symbol("SETQ"): setq_form,
    Symbol("DEFUN"): defun_form,
}
