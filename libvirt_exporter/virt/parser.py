from collections import namedtuple
from xml.etree.ElementTree import XMLParser


DomainDescription = namedtuple('DomainDescription', ['disks', 'interfaces'])
InterfaceSource = namedtuple('InterfaceSource', ['bridge', 'interfaceid'])


class DomainXmlParser:

    """Collects disk and interface sources keyed by their target device.

    Only direct children of ``<devices>`` are considered, so targets of
    consoles, serial ports and the like never show up.
    """

    source_attribs = ["name", "file", "dev", "volume"]

    def __init__(self):
        self.disks = {}
        self.interfaces = {}
        self.path = []
        self.device = None

    def start(self, tag, attrib):
        self.path.append(tag)
        depth = len(self.path)
        if depth == 3 and self.path[1] == "devices" and tag in ("disk", "interface"):
            self.device = {"family": tag, "source": {}, "target": None, "interfaceid": ""}
        elif self.device is None:
            return
        elif depth == 4 and tag == "source":
            self.device["source"] = attrib
        elif depth == 4 and tag == "target":
            self.device["target"] = attrib.get("dev")
        elif depth == 5 and tag == "parameters" and self.path[3] == "virtualport":
            self.device["interfaceid"] = attrib.get("interfaceid", "")

    def end(self, tag):
        self.path.pop()
        if self.device is None or len(self.path) != 2:
            return
        device, self.device = self.device, None
        if not device["target"]:
            return
        source = device["source"]
        if device["family"] == "disk":
            for attr in self.source_attribs:
                if source.get(attr):
                    self.disks[device["target"]] = source[attr]
                    break
            else:
                self.disks[device["target"]] = ""
        else:
            self.interfaces[device["target"]] = InterfaceSource(
                source.get("bridge", ""), device["interfaceid"])

    def data(self, data):
        pass

    def close(self):
        return DomainDescription(self.disks, self.interfaces)


def parse_domain_xml(xml):
    target = DomainXmlParser()
    parser = XMLParser(target=target)
    parser.feed(xml)
    return parser.close()
