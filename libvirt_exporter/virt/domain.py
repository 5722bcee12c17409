from xml.etree.ElementTree import ParseError

import libvirt

from .errors import DomainError, log_libvirt_error
from .parser import parse_domain_xml, InterfaceSource


# memoryStats() tag -> record field
MEMORY_TAGS = {
    'major_fault': 'major_fault',
    'minor_fault': 'minor_fault',
    'unused': 'unused',
    'available': 'available',
    'actual': 'actual_balloon',
    'rss': 'rss',
    'usable': 'usable',
    'disk_caches': 'disk_cache',
}


def translate(stats):
    """Build the metric record of one domain from its bulk statistics.

    Raises DomainError when the name, the XML description or the basic
    domain info can't be obtained. Missing memory statistics are not fatal.
    """
    domain = stats.domain
    try:
        name = domain.name()
        desc = parse_domain_xml(domain.XMLDesc(0))
        state, max_mem, memory, nr_virt_cpu, cpu_time = domain.info()[:5]
    except (libvirt.libvirtError, ParseError) as e:
        raise DomainError("Failed to describe domain: %s" % e) from e

    return {
        'name': name,
        'info': {
            'maximum_memory': max_mem * 1024,
            'memory_usage': memory * 1024,
            'virtual_cpus': nr_virt_cpu,
            'cpu_time': cpu_time,
            'state': state,
        },
        'block': block_stats(stats.block, desc.disks),
        'net': interface_stats(stats.net, desc.interfaces),
        'memory': memory_stats(domain),
    }


def block_stats(devices, disks):
    result = []
    for device in devices:
        disk = dict(device)
        # path is omitted for network disks and empty drives
        if 'path' in device:
            disk['source_file'] = device['path']
        else:
            disk['source_file'] = disks.get(device.get('name'), "")
        disk['target_device'] = device.get('name', "")
        result.append(disk)
    return result


def interface_stats(devices, interfaces):
    result = []
    for device in devices:
        interface = dict(device)
        source = interfaces.get(device.get('name'), InterfaceSource("", ""))
        interface['source_bridge'] = source.bridge
        interface['target_device'] = device.get('name', "")
        interface['virtualportinterfaceid'] = source.interfaceid
        result.append(interface)
    return result


def memory_stats(domain):
    memory = dict.fromkeys(MEMORY_TAGS.values(), 0)
    try:
        reported = domain.memoryStats()
    except libvirt.libvirtError as e:
        log_libvirt_error(e)
        reported = {}

    for tag, value in reported.items():
        field = MEMORY_TAGS.get(tag)
        if field:
            memory[field] = value

    memory['used_percent'] = used_percent(memory['available'], memory['usable'])
    return memory


def used_percent(available, usable):
    if not available or not usable:
        return 0
    return (float(available) - float(usable)) / (float(available) / 100)
