import libvirt
import pytest
from libvirt_exporter.virt.errors import FetchError
from libvirt_exporter.virt.stats import DomainStats, fetch_all, STATS


RAW_STATS = {
    'state.state': 1,
    'cpu.time': 3000000000,
    'balloon.current': 1048576,
    'block.count': 2,
    'block.0.name': 'vda',
    'block.0.path': '/var/lib/libvirt/images/vm1.qcow2',
    'block.0.rd.reqs': 10,
    'block.0.rd.bytes': 4096,
    'block.0.wr.times': 2000000000,
    'block.1.name': 'vdb',
    'block.1.capacity': 10737418240,
    'net.count': 1,
    'net.0.name': 'vnet0',
    'net.0.rx.bytes': 1000,
    'net.0.tx.drop': 3,
}


def test_split_devices():
    stats = DomainStats(object(), RAW_STATS)
    assert stats.block == [
        {'name': 'vda', 'path': '/var/lib/libvirt/images/vm1.qcow2',
         'rd_reqs': 10, 'rd_bytes': 4096, 'wr_times': 2000000000},
        {'name': 'vdb', 'capacity': 10737418240},
    ]
    assert stats.net == [{'name': 'vnet0', 'rx_bytes': 1000, 'tx_drop': 3}]


def test_no_devices():
    stats = DomainStats(object(), {'state.state': 1})
    assert stats.block == []
    assert stats.net == []


def test_release_once():
    stats = DomainStats(object(), {})
    stats.release()
    assert stats.domain is None
    assert stats.released == 1
    with pytest.raises(ValueError):
        stats.release()


def test_fetch_all(conn, domain):
    c = conn([(domain('vm1'), RAW_STATS), (domain('vm2'), {})])
    buf = []
    assert fetch_all(c, buf) is buf
    assert [s.domain.name() for s in buf] == ['vm1', 'vm2']
    assert c.calls == [(STATS, libvirt.VIR_CONNECT_GET_ALL_DOMAINS_STATS_ACTIVE)]


def test_requested_groups():
    for group in (libvirt.VIR_DOMAIN_STATS_STATE, libvirt.VIR_DOMAIN_STATS_CPU_TOTAL,
                  libvirt.VIR_DOMAIN_STATS_INTERFACE, libvirt.VIR_DOMAIN_STATS_BALLOON,
                  libvirt.VIR_DOMAIN_STATS_BLOCK, libvirt.VIR_DOMAIN_STATS_PERF,
                  libvirt.VIR_DOMAIN_STATS_VCPU):
        assert STATS & group


def test_fetch_error(conn):
    with pytest.raises(FetchError) as e:
        fetch_all(conn(fail=True), [])
    assert isinstance(e.value.__cause__, libvirt.libvirtError)
