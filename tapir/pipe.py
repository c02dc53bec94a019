class Pipeable:
    def __rshift__(self, other):
        return Pipeline(self, other)

    def __rrshift__(self, other):
        return self(other)


class Pipeline(Pipeable):
    def __init__(self, *stages):
        self._stages = tuple(s for p in stages for s in (p._stages if isinstance(p, Pipeline) else (p,)))

    def __call__(self, value):
        for stage in self._stages:
            value = stage(value)

        return value

    def __repr__(self):
        return 'pipeline(' + ', '.join(map(repr, self._stages)) + ')'
