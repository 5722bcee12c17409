import libvirt

from .errors import FetchError


STATS = (libvirt.VIR_DOMAIN_STATS_STATE |
         libvirt.VIR_DOMAIN_STATS_CPU_TOTAL |
         libvirt.VIR_DOMAIN_STATS_INTERFACE |
         libvirt.VIR_DOMAIN_STATS_BALLOON |
         libvirt.VIR_DOMAIN_STATS_BLOCK |
         libvirt.VIR_DOMAIN_STATS_PERF |
         libvirt.VIR_DOMAIN_STATS_VCPU)


class DomainStats:

    """Bulk statistics of one domain together with its libvirt handle.

    Device statistics are split per device into dictionaries holding only the
    fields libvirt reported, e.g. ``block.0.rd.bytes`` ends up as
    ``block[0]['rd_bytes']``. A missing key means the field was not reported.
    """

    def __init__(self, domain, stats):
        self.domain = domain
        self.released = 0
        parsed = {}
        for key, value in stats.items():
            keys = key.split('.')
            if len(keys) > 2 and keys[0] in ('block', 'net'):
                devices = parsed.setdefault(keys[0], {})
                devices.setdefault(keys[1], {})['_'.join(keys[2:])] = value

        self.block = _devices(stats, parsed, "block")
        self.net = _devices(stats, parsed, "net")

    def release(self):
        """Drop the domain handle, libvirt frees it with the last reference."""
        if self.released:
            raise ValueError("domain handle released twice")
        self.released += 1
        self.domain = None


def fetch_all(conn, buf):
    """Fetch statistics of all active domains into ``buf``."""
    try:
        result = conn.getAllDomainStats(
            STATS, libvirt.VIR_CONNECT_GET_ALL_DOMAINS_STATS_ACTIVE)
    except libvirt.libvirtError as e:
        raise FetchError("Failed to get domain statistics: %s" % e) from e

    for domain, stats in result:
        buf.append(DomainStats(domain, stats))
    return buf


def _devices(stats, parsed, category):
    devices = parsed.get(category, {})
    count = stats.get(category + '.count', len(devices))
    return [devices.get(str(index), {}) for index in range(count)]
