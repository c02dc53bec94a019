from tapir.pipe import Pipeable


def tap(value, mutate):
    mutate(value)
    return value


# noinspection PyPep8Naming
class tapping(Pipeable):
    # `value >> tapping(f)` reaches __rrshift__ only when type(value) does not handle `>>` itself.
    # Pipeables (and e.g. numpy arrays) take over the operator: use tap(), tapping(f)(value) or Tappable there.
    def __init__(self, mutate):
        self._mutate = mutate

    def __call__(self, value):
        return tap(value, self._mutate)

    def __repr__(self):
        return f'tap({getattr(self._mutate, "__name__", self._mutate)})'


class Tappable:
    def tap(self, mutate):
        return tap(self, mutate)
