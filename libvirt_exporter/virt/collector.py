import logging

import libvirt

from .conn import LibvirtConnection
from .domain import translate
from .errors import ExporterError, log_libvirt_error
from .pool import domain_pool
from .stats import fetch_all
from .steal import collect_steal_time


log = logging.getLogger('libvirt_exporter')


class Collector:

    """Collects one metric record per active domain.

    Every call opens its own connection and closes it again, overlapping
    scrapes never share a connection. ConnectError and FetchError propagate
    to the caller, failures of single domains are logged and the domain is
    left out.
    """

    def __init__(self, uri=None, login="", password="", connection=LibvirtConnection):
        self._uri = uri
        self._login = login
        self._password = password
        self._connection = connection

    def collect(self):
        records = []
        connection = self._connection(self._uri, self._login, self._password)
        with connection as conn:
            with domain_pool.buffer() as domains:
                fetch_all(conn, domains)
                for stats in domains:
                    try:
                        record = self._collect_domain(stats, connection.read_only)
                    except (ExporterError, libvirt.libvirtError) as e:
                        log_libvirt_error(e)
                        continue
                    finally:
                        stats.release()
                    records.append(record)
        log.debug("Collected metrics of %d domains", len(records))
        return records

    def _collect_domain(self, stats, read_only):
        record = translate(stats)
        if read_only:
            return record
        try:
            record['steal'] = collect_steal_time(stats.domain)
        except (ExporterError, libvirt.libvirtError) as e:
            log_libvirt_error(e)
        return record
