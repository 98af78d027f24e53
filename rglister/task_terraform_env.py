import shlex
import sys

from rglister.credentials import load_credentials
from rglister.typedefs import RunConf

import logging
logger = logging.getLogger('rglister.terraform_env')


def do_task_terraform_env(args: RunConf, out=None) -> int:
  """
  Prints the credentials as ARM_* exports, for
    eval "$(rg-lister terraform-env)"
  before a terraform run. The secret is included, this output is meant for a shell.
  """
  out = out or sys.stdout
  env = load_credentials().as_terraform_env()
  if not env:
    print('Azure credentials are not set (AZURE_CLIENT_ID is empty)', file=out)
    return 1
  for name, value in env.items():
    print('export %s=%s' % (name, shlex.quote(value)), file=out)
  logger.info('Exported %d variables.', len(env))
  return 0


def add_terraform_env_subparser(subparsers):
  terraform_env_parser = subparsers.add_parser('terraform-env', help='Print AZURE_* credentials as ARM_* shell exports.')
  terraform_env_parser.set_defaults(task_func=do_task_terraform_env)
