class Subtree:

    def __init__(self, field, elements):
        self._elements = list(elements)
        self.field = field

    def process(self, sink, labels, stats):
        # Fields libvirt did not report are not part of stats, skip them
        for element in self._elements:
            if element.field in stats:
                element.process(sink, labels, stats[element.field])


class Tree(Subtree):

    def __init__(self, elements):
        Subtree.__init__(self, None, elements)


class Metric:

    def __init__(self, desc, field, divisor=None):
        self.desc = desc
        self.field = field
        self.divisor = divisor

    def process(self, sink, labels, value):
        if self.divisor:
            value = float(value) / self.divisor
        sink.add(self.desc, labels, value)
