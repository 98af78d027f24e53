import sys

from rglister.credentials import load_credentials, print_credentials, read_env_values, require_subscription_id
from rglister.errors import ConfigurationError, RgListerError, TokenFetchError
from rglister.ms_credential import fetch_token
from rglister.reporting import print_access_token, print_subscription_id, report_resource_groups, report_resource_groups_json
from rglister.resource_groups import fetch_resource_groups
from rglister.typedefs import RunConf

import logging
logger = logging.getLogger('rglister.list_rgs')


def do_task_list_rgs(args: RunConf, out=None) -> int:
  out = out or sys.stdout
  text_output = args.output == 'text'
  # The dump is plain text, it would break --output json
  if text_output:
    print_credentials(read_env_values(), show_secrets=args.show_secrets, out=out)

  creds = load_credentials()
  if args.subscription_id:
    creds = creds._replace(subscription_id=args.subscription_id)

  try:
    subscription_id = require_subscription_id(creds)
  except ConfigurationError as e:
    print(e, file=out)
    return 1

  if text_output:
    print_subscription_id(subscription_id, out=out)

  try:
    access_token = fetch_token(args, creds, subscription_id)
  except (ConfigurationError, TokenFetchError) as e:
    logger.debug('Token fetch failed', exc_info=True)
    print('Error getting access token: %s' % e, file=out)
    return 1

  if text_output:
    print_access_token(access_token, show_secrets=args.show_secrets, out=out)

  try:
    groups = fetch_resource_groups(subscription_id, access_token, timeout=args.http_timeout)
  except RgListerError as e:
    logger.debug('Resource group fetch failed', exc_info=True)
    print('Error fetching resource groups: %s' % e, file=out)
    return 1

  if text_output:
    report_resource_groups(groups, out=out)
  else:
    report_resource_groups_json(groups, out=out)
  logger.info('Task ready.')
  return 0


def add_list_rgs_subparser(subparsers):
  list_rgs_parser = subparsers.add_parser('list', help='List the resource groups of a subscription.')
  list_rgs_parser.set_defaults(task_func=do_task_list_rgs)
  list_rgs_parser.add_argument('--subscription-id', help='Optional: overrides AZURE_SUBSCRIPTION_ID.')
  list_rgs_parser.add_argument('--output', choices=['text', 'json'], default='text', help='Report format. Default: text')
  list_rgs_parser.add_argument('--http-timeout', type=float, default=None, help='Optional: seconds to wait for the management API. Default: no timeout.')
