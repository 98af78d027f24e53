from typing import Optional


class RgListerError(Exception):
  """ Base for every failure that ends a run. """


class ConfigurationError(RgListerError):
  pass


class TokenFetchError(RgListerError):
  pass


class RequestError(RgListerError):
  """ Request could not be built """


class TransportError(RgListerError):
  """ Request could not be sent: DNS, connection, TLS, timeout """


class ProtocolError(RgListerError):

  def __init__(self, status_code: int, body: Optional[str] = None):
    super().__init__('unexpected response status code: %d' % status_code)
    self.status_code = status_code
    self.body = body


class DecodeError(RgListerError):
  pass
