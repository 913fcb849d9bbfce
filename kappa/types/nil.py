from __future__ import annotations


class NilType:
    def __repr__(self): return "NIL"
    def __bool__(self): return False

    # Nil is equal only to Nil
    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


class TrueType:
    def __repr__(self): return "T"
    def __bool__(self): return True

    def __eq__(self, other):
        return isinstance(other, TrueType)

    def __hash__(self):
        return hash(TrueType)


Nil = NilType()
T = TrueType()
