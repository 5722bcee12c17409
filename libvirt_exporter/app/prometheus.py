from ..virt.collector import Collector
from ..virt.errors import ExporterError, log_libvirt_error
from . import metrics
from .sink import MetricSink, make_family
from .tree import Tree, Subtree, Metric

NS_PER_SECOND = 1e9


class LibvirtCollector:

    _domain = Tree([
        Subtree('info', [
            Metric(metrics.DOMAIN_INFO_MAX_MEM, 'maximum_memory'),
            Metric(metrics.DOMAIN_INFO_MEMORY_USAGE, 'memory_usage'),
            Metric(metrics.DOMAIN_INFO_NR_VIRT_CPU, 'virtual_cpus'),
            Metric(metrics.DOMAIN_INFO_CPU_TIME, 'cpu_time', NS_PER_SECOND),
            Metric(metrics.DOMAIN_INFO_STATE, 'state'),
        ]),
        Subtree('memory', [
            Metric(metrics.MEMORY_MAJOR_FAULT, 'major_fault'),
            Metric(metrics.MEMORY_MINOR_FAULT, 'minor_fault'),
            Metric(metrics.MEMORY_UNUSED, 'unused'),
            Metric(metrics.MEMORY_AVAILABLE, 'available'),
            Metric(metrics.MEMORY_ACTUAL_BALLOON, 'actual_balloon'),
            Metric(metrics.MEMORY_RSS, 'rss'),
            Metric(metrics.MEMORY_USABLE, 'usable'),
            Metric(metrics.MEMORY_DISK_CACHE, 'disk_cache'),
            Metric(metrics.MEMORY_USED_PERCENT, 'used_percent'),
        ]),
    ])

    _disks = Tree([
        Metric(metrics.BLOCK_READ_BYTES, 'rd_bytes'),
        Metric(metrics.BLOCK_READ_REQUESTS, 'rd_reqs'),
        # TODO: computed from rd_bytes instead of rd_times, switch to rd_times
        # together with a rename of the metric
        Metric(metrics.BLOCK_READ_TIME, 'rd_bytes', NS_PER_SECOND),
        Metric(metrics.BLOCK_WRITE_BYTES, 'wr_bytes'),
        Metric(metrics.BLOCK_WRITE_REQUESTS, 'wr_reqs'),
        Metric(metrics.BLOCK_WRITE_TIME, 'wr_times', NS_PER_SECOND),
        Metric(metrics.BLOCK_FLUSH_REQUESTS, 'fl_reqs'),
        Metric(metrics.BLOCK_FLUSH_TIME, 'fl_times'),
        Metric(metrics.BLOCK_ALLOCATION, 'allocation'),
        Metric(metrics.BLOCK_CAPACITY, 'capacity'),
        Metric(metrics.BLOCK_PHYSICAL_SIZE, 'physical'),
    ])

    _interfaces = Tree([
        Metric(metrics.INTERFACE_RX_BYTES, 'rx_bytes'),
        Metric(metrics.INTERFACE_RX_PACKETS, 'rx_pkts'),
        Metric(metrics.INTERFACE_RX_ERRS, 'rx_errs'),
        Metric(metrics.INTERFACE_RX_DROP, 'rx_drop'),
        Metric(metrics.INTERFACE_TX_BYTES, 'tx_bytes'),
        Metric(metrics.INTERFACE_TX_PACKETS, 'tx_pkts'),
        Metric(metrics.INTERFACE_TX_ERRS, 'tx_errs'),
        Metric(metrics.INTERFACE_TX_DROP, 'tx_drop'),
    ])

    _cpus = Tree([
        Metric(metrics.DOMAIN_INFO_CPU_STEAL_TIME, 'steal_time'),
    ])

    def __init__(self, collector=None):
        self.collector = collector or Collector()

    def describe(self):
        for desc in metrics.DESCRIPTORS:
            yield make_family(desc)

    def collect(self):
        # A fresh sink per scrape, overlapping scrapes don't share samples
        sink = MetricSink()
        try:
            stats = self.collector.collect()
        except ExporterError as e:
            log_libvirt_error(e)
            sink.add(metrics.UP, [], 0)
        else:
            for domainStats in stats:
                self.process(sink, domainStats)
            sink.add(metrics.UP, [], 1)

        for metric in sink.collect():
            yield metric

    def process(self, sink, domainStats):
        # Resolve the domain label once, every sample of the domain uses it
        name = domainStats['name']
        self._domain.process(sink, [name], domainStats)

        for disk in domainStats.get('block', []):
            labels = [name, disk['source_file'], disk['target_device']]
            self._disks.process(sink, labels, disk)

        for interface in domainStats.get('net', []):
            labels = [name, interface['source_bridge'], interface['target_device'],
                      interface['virtualportinterfaceid']]
            self._interfaces.process(sink, labels, interface)

        for cpu in domainStats.get('steal', []):
            labels = [name, cpu['cpu']]
            self._cpus.process(sink, labels, cpu)
