import argparse
import logging
import os

from gevent import pywsgi

from .app.prometheus import LibvirtCollector
from .app.rest import make_rest_app
from .virt.collector import Collector


def parse_listen_address(address):
    host, _, port = address.rpartition(':')
    return host.strip('[]'), int(port)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Prometheus metrics exporter for libvirt')
    parser.add_argument('--web.listen-address', dest='listen_address', type=str, default=':9177',
                        help='Address to listen on for web interface and telemetry.')
    parser.add_argument('--web.telemetry-path', dest='metrics_path', type=str, default='/metrics',
                        help='Path under which to expose metrics.')
    parser.add_argument('--libvirt.uri', dest='uri', type=str, default='qemu:///system',
                        help='Libvirt URI from which to extract metrics.')
    parser.add_argument('--libvirt.auth.username', dest='username', type=str,
                        default=os.environ.get('LIBVIRT_EXPORTER_USERNAME', ''),
                        help='User name for SASL login (you can also use LIBVIRT_EXPORTER_USERNAME environment variable)')
    parser.add_argument('--libvirt.auth.password', dest='password', type=str,
                        default=os.environ.get('LIBVIRT_EXPORTER_PASSWORD', ''),
                        help='Password for SASL login (you can also use LIBVIRT_EXPORTER_PASSWORD environment variable)')
    parser.add_argument('-v', '--verbose', action='store_true', default=False)
    return parser.parse_args(argv)


def run():
    args = parse_args()

    logging.basicConfig(format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    logging.getLogger().setLevel(level=logging.INFO)
    if args.verbose:
        logging.getLogger('libvirt_exporter').setLevel(level=logging.DEBUG)

    collector = LibvirtCollector(Collector(args.uri, args.username, args.password))
    app = make_rest_app(collector, args.metrics_path)

    listener = parse_listen_address(args.listen_address)
    logging.getLogger('libvirt_exporter').info("Serving metrics of %s on %s%s",
                                               args.uri, args.listen_address, args.metrics_path)
    httpd = pywsgi.WSGIServer(listener, app)
    httpd.serve_forever()


if __name__ == '__main__':
    run()
