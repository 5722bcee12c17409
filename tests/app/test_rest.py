import pytest
import webtest
from libvirt_exporter.app.prometheus import LibvirtCollector
from libvirt_exporter.app.rest import make_rest_app
from libvirt_exporter.virt.errors import ConnectError


@pytest.fixture
def _app():

    class Collector:

        def __init__(self):
            self.metrics = []
            self.error = None

        def set_metrics(self, metrics):
            self.metrics = metrics

        def collect(self):
            if self.error:
                raise self.error
            return self.metrics

    collector = Collector()
    app = make_rest_app(LibvirtCollector(collector), '/probe/metrics')
    app.collector = collector
    return app


@pytest.fixture
def app(_app):
    return webtest.TestApp(_app)


def test_landing_page(app):
    resp = app.get("/")
    assert resp.status_int == 200
    assert "<a href='/probe/metrics'>Metrics</a>" in resp


def test_metrics(app):
    resp = app.get("/probe/metrics")
    assert resp.status_int == 200
    assert "libvirt_up 1.0" in resp
    assert "process_virtual_memory_bytes" not in resp


def test_down(app):
    app.app.collector.error = ConnectError("refused")
    resp = app.get("/probe/metrics")
    assert resp.status_int == 200
    assert "libvirt_up 0.0" in resp
    assert "libvirt_domain_info" not in resp


def test_vm_metrics(app):
    app.app.collector.set_metrics([{
        "name": "vm1",
        "info": {"state": 1, "cpu_time": 1000000000},
        "block": [],
        "net": [],
        "memory": {"used_percent": 0},
    }])
    resp = app.get("/probe/metrics")
    assert 'libvirt_domain_info_vstate{domain="vm1"} 1.0' in resp
    assert 'libvirt_domain_info_cpu_time_seconds_total{domain="vm1"} 1.0' in resp
    assert '# TYPE libvirt_domain_info_cpu_time_seconds_total counter' in resp


def test_gzip(app):
    resp = app.get("/probe/metrics", headers={"Accept-Encoding": "gzip"})
    assert resp.headers["Content-Encoding"] == "gzip"
