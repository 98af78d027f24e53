import subprocess
from typing import Callable, List

from rglister.errors import ConfigurationError, TokenFetchError
from rglister.typedefs import AccessToken, SubscriptionId
import rglister.settings as S

import logging
logger = logging.getLogger('rglister.azcli_query')

CmdRunner = Callable[[List[str]], str]


def run_cmd(cmd_args: List[str]) -> str:
  logger.debug('run_cmd %s', cmd_args[:3])
  try:
    r = subprocess.run(cmd_args, capture_output=True)
  except OSError as e:
    raise TokenFetchError('cannot run %s: %s' % (cmd_args[0], e)) from e
  if r.returncode != 0:
    err = r.stderr.decode('utf-8', errors='replace').strip()
    logger.debug('run_cmd (%s), got error: %s', ' '.join(cmd_args[:3]), err)
    raise TokenFetchError('%s exited with status %d: %s' % (cmd_args[0], r.returncode, err))
  return r.stdout.decode('utf-8', errors='replace')


def get_access_token(subscription_id: SubscriptionId, runner: CmdRunner = run_cmd) -> AccessToken:
  """
  Token for the subscription from the logged in az session.
  az keeps the session and the token cache, nothing is refreshed here.
  """
  if not subscription_id:
    raise ConfigurationError('Azure subscription ID is not set')
  token = runner(S.mk_az_token_cmd(subscription_id)).strip()
  if not token:
    raise TokenFetchError('az returned an empty access token')
  logger.info('Got access token for subscription %s', subscription_id)
  return token
