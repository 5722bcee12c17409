from libvirt_exporter.exporter import parse_args, parse_listen_address


def test_defaults(monkeypatch):
    monkeypatch.delenv('LIBVIRT_EXPORTER_USERNAME', raising=False)
    monkeypatch.delenv('LIBVIRT_EXPORTER_PASSWORD', raising=False)
    args = parse_args([])
    assert args.listen_address == ':9177'
    assert args.metrics_path == '/metrics'
    assert args.uri == 'qemu:///system'
    assert args.username == ''
    assert args.password == ''
    assert not args.verbose


def test_credentials_from_environment(monkeypatch):
    monkeypatch.setenv('LIBVIRT_EXPORTER_USERNAME', 'admin')
    monkeypatch.setenv('LIBVIRT_EXPORTER_PASSWORD', 'secret')
    args = parse_args(['--libvirt.uri', 'qemu+tcp://host/system'])
    assert args.uri == 'qemu+tcp://host/system'
    assert (args.username, args.password) == ('admin', 'secret')
    args = parse_args(['--libvirt.auth.username', 'other'])
    assert args.username == 'other'


def test_parse_listen_address():
    assert parse_listen_address(':9177') == ('', 9177)
    assert parse_listen_address('127.0.0.1:8080') == ('127.0.0.1', 8080)
    assert parse_listen_address('[::1]:9177') == ('::1', 9177)
