import logging

from flask import Flask, Response
from prometheus_client import CollectorRegistry, make_wsgi_app

from .prometheus import LibvirtCollector


LANDING_PAGE = """<html>
<head>
	<title>Libvirt Exporter</title></head>
<body>
	<h1>Libvirt Exporter</h1>
	<p>
		<a href='%s'>Metrics</a>
	</p>
</body>
</html>"""


def make_rest_app(collector=None, metrics_path='/metrics'):
    app = Flask(__name__)

    # set up logging
    if not app.debug:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(logging.ERROR)
        app.logger.addHandler(stream_handler)

    # Register the libvirt collector on its own registry, the process
    # metrics of the default registry are not exported
    app.registry = CollectorRegistry()
    app.registry.register(collector or LibvirtCollector())
    prometheus_app = make_wsgi_app(app.registry)

    @app.route('/')
    def landing_page():
        return Response(LANDING_PAGE % metrics_path, mimetype='text/html')

    def prom_metrics():
        # gzip is negotiated by prometheus_client
        return prometheus_app

    app.add_url_rule(metrics_path, 'metrics', prom_metrics)
    return app
