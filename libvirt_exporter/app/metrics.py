from collections import namedtuple


GAUGE = "gauge"
COUNTER = "counter"

Desc = namedtuple('Desc', ['name', 'documentation', 'type', 'labels'])


def _name(subsystem, name):
    return '_'.join(part for part in ('libvirt', subsystem, name) if part)


DOMAIN = ('domain',)
BLOCK = ('domain', 'source_file', 'target_device')
INTERFACE = ('domain', 'source_bridge', 'target_device', 'virtualportinterfaceid')
CPU = ('domain', 'cpu')

UP = Desc(_name('', 'up'), "Whether scraping libvirt's metrics was successful.", GAUGE, ())

DOMAIN_INFO_MAX_MEM = Desc(
    _name('domain_info', 'maximum_memory_bytes'),
    "Maximum allowed memory of the domain, in bytes.", GAUGE, DOMAIN)
DOMAIN_INFO_MEMORY_USAGE = Desc(
    _name('domain_info', 'memory_usage_bytes'),
    "Memory usage of the domain, in bytes.", GAUGE, DOMAIN)
DOMAIN_INFO_NR_VIRT_CPU = Desc(
    _name('domain_info', 'virtual_cpus'),
    "Number of virtual CPUs for the domain.", GAUGE, DOMAIN)
DOMAIN_INFO_CPU_TIME = Desc(
    _name('domain_info', 'cpu_time_seconds_total'),
    "Amount of CPU time used by the domain, in seconds.", COUNTER, DOMAIN)
DOMAIN_INFO_CPU_STEAL_TIME = Desc(
    _name('domain_info', 'cpu_steal_time_seconds_total'),
    "Amount of CPU time stolen from the domain, in seconds.", COUNTER, CPU)
DOMAIN_INFO_STATE = Desc(
    _name('domain_info', 'vstate'),
    "Virtual domain state. 0: no state, 1: the domain is running, 2: the domain is blocked on resource, "
    "3: the domain is paused by user, 4: the domain is being shut down, 5: the domain is shut off, "
    "6: the domain is crashed, 7: the domain is suspended by guest power management", GAUGE, DOMAIN)

BLOCK_READ_BYTES = Desc(
    _name('domain_block_stats', 'read_bytes_total'),
    "Number of bytes read from a block device, in bytes.", COUNTER, BLOCK)
BLOCK_READ_REQUESTS = Desc(
    _name('domain_block_stats', 'read_requests_total'),
    "Number of read requests from a block device.", COUNTER, BLOCK)
BLOCK_READ_TIME = Desc(
    _name('domain_block_stats', 'read_time_total'),
    "Total time spent on reads from a block device, in seconds.", COUNTER, BLOCK)
BLOCK_WRITE_BYTES = Desc(
    _name('domain_block_stats', 'write_bytes_total'),
    "Number of bytes written to a block device, in bytes.", COUNTER, BLOCK)
BLOCK_WRITE_REQUESTS = Desc(
    _name('domain_block_stats', 'write_requests_total'),
    "Number of write requests to a block device.", COUNTER, BLOCK)
BLOCK_WRITE_TIME = Desc(
    _name('domain_block_stats', 'write_time_total'),
    "Total time spent on writes on a block device, in seconds.", COUNTER, BLOCK)
BLOCK_FLUSH_REQUESTS = Desc(
    _name('domain_block_stats', 'flush_requests_total'),
    "Total flush requests from a block device.", COUNTER, BLOCK)
BLOCK_FLUSH_TIME = Desc(
    _name('domain_block_stats', 'flush_total'),
    "Total time spent on cache flushing to a block device, in ns.", COUNTER, BLOCK)
BLOCK_ALLOCATION = Desc(
    _name('domain_block_stats', 'allocation'),
    "Offset of the highest written sector on a block device.", GAUGE, BLOCK)
BLOCK_CAPACITY = Desc(
    _name('domain_block_stats', 'capacity'),
    "Logical size in bytes of the block device backing image.", GAUGE, BLOCK)
BLOCK_PHYSICAL_SIZE = Desc(
    _name('domain_block_stats', 'physicalsize'),
    "Physical size in bytes of the container of the backing image.", GAUGE, BLOCK)

INTERFACE_RX_BYTES = Desc(
    _name('domain_interface_stats', 'receive_bytes_total'),
    "Number of bytes received on a network interface, in bytes.", COUNTER, INTERFACE)
INTERFACE_RX_PACKETS = Desc(
    _name('domain_interface_stats', 'receive_packets_total'),
    "Number of packets received on a network interface.", COUNTER, INTERFACE)
INTERFACE_RX_ERRS = Desc(
    _name('domain_interface_stats', 'receive_errors_total'),
    "Number of packet receive errors on a network interface.", COUNTER, INTERFACE)
INTERFACE_RX_DROP = Desc(
    _name('domain_interface_stats', 'receive_drops_total'),
    "Number of packet receive drops on a network interface.", COUNTER, INTERFACE)
INTERFACE_TX_BYTES = Desc(
    _name('domain_interface_stats', 'transmit_bytes_total'),
    "Number of bytes transmitted on a network interface, in bytes.", COUNTER, INTERFACE)
INTERFACE_TX_PACKETS = Desc(
    _name('domain_interface_stats', 'transmit_packets_total'),
    "Number of packets transmitted on a network interface.", COUNTER, INTERFACE)
INTERFACE_TX_ERRS = Desc(
    _name('domain_interface_stats', 'transmit_errors_total'),
    "Number of packet transmit errors on a network interface.", COUNTER, INTERFACE)
INTERFACE_TX_DROP = Desc(
    _name('domain_interface_stats', 'transmit_drops_total'),
    "Number of packet transmit drops on a network interface.", COUNTER, INTERFACE)

MEMORY_MAJOR_FAULT = Desc(
    _name('domain_memory_stats', 'major_fault'),
    "Page faults occur when a process makes a valid access to virtual memory that is not available. "
    "When servicing the page fault, if disk IO is required, it is considered a major fault.", GAUGE, DOMAIN)
MEMORY_MINOR_FAULT = Desc(
    _name('domain_memory_stats', 'minor_fault'),
    "Page faults occur when a process makes a valid access to virtual memory that is not available. "
    "When servicing the page fault, if disk IO is not required, it is considered a minor fault.", GAUGE, DOMAIN)
MEMORY_UNUSED = Desc(
    _name('domain_memory_stats', 'unused'),
    "The amount of memory left completely unused by the system. Memory that is available but used for "
    "reclaimable caches should NOT be reported as free. This value is expressed in kB.", GAUGE, DOMAIN)
MEMORY_AVAILABLE = Desc(
    _name('domain_memory_stats', 'available'),
    "The total amount of usable memory as seen by the domain. This value may be less than the amount of "
    "memory assigned to the domain if a balloon driver is in use or if the guest OS does not initialize all "
    "assigned pages. This value is expressed in kB.", GAUGE, DOMAIN)
MEMORY_ACTUAL_BALLOON = Desc(
    _name('domain_memory_stats', 'actual_balloon'),
    "Current balloon value (in kB).", GAUGE, DOMAIN)
MEMORY_RSS = Desc(
    _name('domain_memory_stats', 'rss'),
    "Resident Set Size of the process running the domain. This value is in kB.", GAUGE, DOMAIN)
MEMORY_USABLE = Desc(
    _name('domain_memory_stats', 'usable'),
    "How much the balloon can be inflated without pushing the guest system to swap, corresponds "
    "to 'Available' in /proc/meminfo.", GAUGE, DOMAIN)
MEMORY_DISK_CACHE = Desc(
    _name('domain_memory_stats', 'disk_cache'),
    "The amount of memory that can be quickly reclaimed without additional I/O (in kB). "
    "Typically these pages are used for caching files from disk.", GAUGE, DOMAIN)
MEMORY_USED_PERCENT = Desc(
    _name('domain_memory_stats', 'used_percent'),
    "The amount of memory in percent, that used by domain.", GAUGE, DOMAIN)

DESCRIPTORS = (
    UP,

    DOMAIN_INFO_MAX_MEM,
    DOMAIN_INFO_MEMORY_USAGE,
    DOMAIN_INFO_NR_VIRT_CPU,
    DOMAIN_INFO_CPU_TIME,
    DOMAIN_INFO_CPU_STEAL_TIME,
    DOMAIN_INFO_STATE,

    BLOCK_READ_BYTES,
    BLOCK_READ_REQUESTS,
    BLOCK_READ_TIME,
    BLOCK_WRITE_BYTES,
    BLOCK_WRITE_REQUESTS,
    BLOCK_WRITE_TIME,
    BLOCK_FLUSH_REQUESTS,
    BLOCK_FLUSH_TIME,
    BLOCK_ALLOCATION,
    BLOCK_CAPACITY,
    BLOCK_PHYSICAL_SIZE,

    INTERFACE_RX_BYTES,
    INTERFACE_RX_PACKETS,
    INTERFACE_RX_ERRS,
    INTERFACE_RX_DROP,
    INTERFACE_TX_BYTES,
    INTERFACE_TX_PACKETS,
    INTERFACE_TX_ERRS,
    INTERFACE_TX_DROP,

    MEMORY_MAJOR_FAULT,
    MEMORY_MINOR_FAULT,
    MEMORY_UNUSED,
    MEMORY_AVAILABLE,
    MEMORY_ACTUAL_BALLOON,
    MEMORY_RSS,
    MEMORY_USABLE,
    MEMORY_DISK_CACHE,
    MEMORY_USED_PERCENT,
)
