import logging

import libvirt

from .errors import ConnectError


log = logging.getLogger('libvirt_exporter')

DISCONNECTED = "Disconnected"
ANONYMOUS_FULL = "AnonymousFull"
AUTHENTICATED_FULL = "AuthenticatedFull"
READ_ONLY = "ReadOnly"


class LibvirtConnection:

    """A single scrape's connection to libvirt.

    Access is escalated downwards: full access without credentials first,
    then full access with SASL credentials (only when both a login and a
    password are configured) and finally a read-only connection. The first
    strategy that works wins.
    """

    def __init__(self, uri=None, login="", password=""):
        self._uri = uri
        self._login = login
        self._password = password
        self._conn = None
        self.state = DISCONNECTED

    @property
    def read_only(self):
        return self.state == READ_ONLY

    def open(self):
        strategies = [(ANONYMOUS_FULL, self._open_full)]
        if self._login and self._password:
            strategies.append((AUTHENTICATED_FULL, self._open_with_auth))
        else:
            log.debug("No username or password provided, not attempting "
                      "to authenticate using SASL")
        strategies.append((READ_ONLY, self._open_read_only))

        last_error = None
        for state, strategy in strategies:
            try:
                conn = strategy()
            except libvirt.libvirtError as e:
                log.debug("%s connection to %s failed: %s", state, self._uri, e)
                last_error = e
                continue
            if conn is None:
                continue
            self._conn = conn
            self.state = state
            return conn, self.read_only

        raise ConnectError("Failed to open connection to %s: %s" %
                           (self._uri, last_error)) from last_error

    def close(self):
        if self._conn is None:
            return
        try:
            self._conn.close()
        except libvirt.libvirtError as e:
            log.error(e)
        self._conn = None
        self.state = DISCONNECTED

    def _open_full(self):
        return libvirt.open(self._uri)

    def _open_with_auth(self):
        auth = [[libvirt.VIR_CRED_AUTHNAME, libvirt.VIR_CRED_PASSPHRASE],
                self._request_credentials, None]
        # flags 0 means read-write
        return libvirt.openAuth(self._uri, auth, 0)

    def _open_read_only(self):
        return libvirt.openReadOnly(self._uri)

    def _request_credentials(self, credentials, user_data):
        for credential in credentials:
            if credential[0] == libvirt.VIR_CRED_AUTHNAME:
                credential[4] = self._login
            elif credential[0] == libvirt.VIR_CRED_PASSPHRASE:
                credential[4] = self._password
            else:
                log.debug("Unsupported credential type %s requested",
                          credential[0])
                return -1
        return 0

    def __enter__(self):
        conn, _ = self.open()
        return conn

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
