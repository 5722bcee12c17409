from threading import Lock

from prometheus_client.core import GaugeMetricFamily, CounterMetricFamily

from .metrics import COUNTER, DESCRIPTORS


def make_family(desc):
    if desc.type == COUNTER:
        return CounterMetricFamily(desc.name, desc.documentation, labels=list(desc.labels))
    return GaugeMetricFamily(desc.name, desc.documentation, labels=list(desc.labels))


class MetricSink:

    """Samples of a single scrape.

    Writers may add samples from several threads and in any order, nothing
    is deduplicated.
    """

    def __init__(self):
        self._families = {}
        self._lock = Lock()

    def add(self, desc, labels, value):
        with self._lock:
            family = self._families.get(desc.name)
            if family is None:
                family = self._families[desc.name] = make_family(desc)
            family.add_metric([str(label) for label in labels], value)

    def collect(self):
        for desc in DESCRIPTORS:
            family = self._families.get(desc.name)
            if family is not None:
                yield family
