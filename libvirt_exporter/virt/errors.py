import logging

import libvirt


log = logging.getLogger('libvirt_exporter')


class ExporterError(Exception):
    pass


class ConnectError(ExporterError):
    """No connection strategy succeeded, the scrape is reported as down."""


class FetchError(ExporterError):
    """The bulk statistics call failed, the scrape is reported as down."""


class DomainError(ExporterError):
    """A single domain could not be translated, it is skipped."""


class ProbeError(ExporterError):
    """Steal time could not be probed for a single domain."""


def error_origin(err):
    """Return the (code, domain) pair libvirt attached to an error.

    Exporter errors are unwrapped through their cause. Returns (None, None)
    for anything that did not originate in libvirt.
    """
    while err is not None and not isinstance(err, libvirt.libvirtError):
        err = err.__cause__
    if err is None:
        return None, None
    return err.get_error_code(), err.get_error_domain()


def is_domain_not_running(err):
    return error_origin(err) == (libvirt.VIR_ERR_OPERATION_INVALID,
                                 libvirt.VIR_FROM_DOMAIN)


def log_libvirt_error(err):
    # "Requested operation is not valid: domain is not running"
    if is_domain_not_running(err):
        return
    log.error(err)
