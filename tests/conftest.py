import libvirt
import pytest


VM_XML = """<domain type='kvm' id='1'>
  <name>vm1</name>
  <memory unit='KiB'>2097152</memory>
  <devices>
    <emulator>/usr/bin/qemu-system-x86_64</emulator>
    <disk type='file' device='disk'>
      <driver name='qemu' type='qcow2'/>
      <source file='/var/lib/libvirt/images/vm1.qcow2'/>
      <target dev='vda' bus='virtio'/>
    </disk>
    <disk type='network' device='disk'>
      <source protocol='rbd' name='volumes/vm1-data'>
        <host name='ceph-mon' port='6789'/>
      </source>
      <target dev='vdb' bus='virtio'/>
    </disk>
    <interface type='bridge'>
      <mac address='52:54:00:12:34:56'/>
      <source bridge='br-int'/>
      <virtualport type='openvswitch'>
        <parameters interfaceid='5a2c1cd4-1c8b-4d4b-9d8e-2f1f7bb0b0a1'/>
      </virtualport>
      <target dev='vnet0'/>
    </interface>
    <interface type='network'>
      <source network='default'/>
      <target dev='vnet1'/>
    </interface>
    <serial type='pty'>
      <target port='0'/>
    </serial>
  </devices>
</domain>
"""


def libvirt_error(message, code=libvirt.VIR_ERR_INTERNAL_ERROR, domain=libvirt.VIR_FROM_NONE):
    e = libvirt.libvirtError(message)
    e.err = (code, domain, message, libvirt.VIR_ERR_ERROR, None, None, None, -1, -1)
    return e


class Domain:

    def __init__(self, name="vm1", xml=VM_XML, info=None, memory=None, fail=()):
        self._name = name
        self._xml = xml
        self._info = info or [1, 2097152, 1048576, 2, 3000000000]
        self._memory = memory if memory is not None else {}
        self._fail = set(fail)

    def _check(self, call):
        if call in self._fail:
            raise libvirt_error("%s failed for %s" % (call, self._name))

    def name(self):
        self._check('name')
        return self._name

    def XMLDesc(self, flags=0):
        self._check('XMLDesc')
        return self._xml

    def info(self):
        self._check('info')
        return self._info

    def memoryStats(self):
        self._check('memoryStats')
        return self._memory


class Conn:

    def __init__(self, stats=(), fail=False):
        self.stats = list(stats)
        self.fail = fail
        self.closed = False
        self.calls = []

    def getAllDomainStats(self, stats=0, flags=0):
        self.calls.append((stats, flags))
        if self.fail:
            raise libvirt_error("bulk stats failed")
        return self.stats

    def close(self):
        self.closed = True
        return 0


@pytest.fixture
def domain():
    return Domain


@pytest.fixture
def conn():
    return Conn


@pytest.fixture
def error():
    return libvirt_error


@pytest.fixture
def vm_xml():
    return VM_XML
