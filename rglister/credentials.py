import os
import sys
from typing import Mapping, Optional, TextIO

from rglister.errors import ConfigurationError
from rglister.typedefs import CredentialSet, SubscriptionId
import rglister.settings as S

import logging
logger = logging.getLogger('rglister.credentials')


def read_env_values(environ: Optional[Mapping[str, str]] = None) -> CredentialSet:
  """ The four variables as they are, no gating """
  environ = os.environ if environ is None else environ
  return CredentialSet(
    client_id=environ.get(S.ENV_CLIENT_ID, ''),
    client_secret=environ.get(S.ENV_CLIENT_SECRET, ''),
    tenant_id=environ.get(S.ENV_TENANT_ID, ''),
    subscription_id=environ.get(S.ENV_SUBSCRIPTION_ID, ''),
  )


def load_credentials(environ: Optional[Mapping[str, str]] = None) -> CredentialSet:
  """
  Credentials are taken into use only when a client id is present,
  otherwise every field stays unset. Never fails: callers check what
  they need, see require_subscription_id.
  """
  values = read_env_values(environ)
  if not values.client_id:
    logger.debug('%s not set, ignoring the rest of the credential variables', S.ENV_CLIENT_ID)
    return CredentialSet()
  return values


def print_credentials(values: CredentialSet, show_secrets=False, out: TextIO = sys.stdout):
  secret = values.client_secret
  if secret and not show_secrets:
    secret = S.MASKED
  print('Exported Values:', file=out)
  print('ARM_CLIENT_ID: %s' % (values.client_id or ''), file=out)
  print('ARM_CLIENT_SECRET: %s' % (secret or ''), file=out)
  print('ARM_TENANT_ID: %s' % (values.tenant_id or ''), file=out)
  print('ARM_SUBSCRIPTION_ID: %s' % (values.subscription_id or ''), file=out)


def require_subscription_id(creds: CredentialSet) -> SubscriptionId:
  if not creds.subscription_id:
    raise ConfigurationError('Azure subscription ID is not set')
  return creds.subscription_id
