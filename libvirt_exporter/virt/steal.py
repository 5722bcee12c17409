import json
import logging
from collections import namedtuple

import libvirt
import libvirt_qemu

from .errors import ProbeError
from .pool import thread_pool


log = logging.getLogger('libvirt_exporter')

# query-cpus was removed in QEMU 6.0, query-cpus-fast carries the same
# thread ids.
QUERY_CPUS = '{"execute": "query-cpus-fast"}'

SCHEDSTAT = '/proc/%d/schedstat'

NS_PER_SECOND = 1e9

QemuThread = namedtuple('QemuThread', ['cpu', 'thread_id'])


def read_steal_time(thread_id, path_template=SCHEDSTAT):
    """Return the run queue wait time of a host thread in seconds.

    The schedstat file holds exactly three fields: time spent on the cpu,
    time spent waiting on a run queue and the number of timeslices run.
    """
    path = path_template % thread_id
    with open(path) as f:
        content = f.read()

    values = content.split()
    if len(values) != 3:
        raise ValueError("Unexpected amount of fields in %s. The file content is %r"
                         % (path, content))
    return float(values[1]) / NS_PER_SECOND


def query_cpu_threads(domain, threads):
    """Ask the QEMU monitor for the host thread of every vCPU."""
    try:
        result = libvirt_qemu.qemuMonitorCommand(
            domain, QUERY_CPUS,
            libvirt_qemu.VIR_DOMAIN_QEMU_MONITOR_COMMAND_DEFAULT)
    except libvirt.libvirtError as e:
        raise ProbeError("Failed to query vCPU threads: %s" % e) from e

    try:
        for cpu in json.loads(result)['return']:
            threads.append(QemuThread(
                cpu.get('cpu-index', cpu.get('CPU')),
                cpu.get('thread-id', cpu.get('thread_id'))))
    except (ValueError, KeyError, TypeError) as e:
        raise ProbeError("Unexpected reply to %s: %s" % (QUERY_CPUS, e)) from e
    return threads


def collect_steal_time(domain, path_template=SCHEDSTAT):
    """Return per vCPU steal time samples plus a ``total`` sample.

    Threads whose schedstat file can't be read are skipped, the total sample
    is always part of the result.
    """
    samples = []
    total = 0.0
    with thread_pool.buffer() as threads:
        query_cpu_threads(domain, threads)
        for thread in threads:
            try:
                steal_time = read_steal_time(thread.thread_id, path_template)
            except (EnvironmentError, ValueError, TypeError) as e:
                log.warning("Error fetching steal time for the thread %s: %s. Skipping",
                            thread.thread_id, e)
                continue
            total += steal_time
            samples.append({'cpu': str(thread.cpu), 'steal_time': steal_time})
    samples.append({'cpu': 'total', 'steal_time': total})
    return samples
