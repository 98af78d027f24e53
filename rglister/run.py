import argparse

from rglister.settings import setup_logging
from rglister.task_list_rgs import add_list_rgs_subparser, do_task_list_rgs
from rglister.task_terraform_env import add_terraform_env_subparser


def mk_parser() -> argparse.ArgumentParser:
  rglister_parser = argparse.ArgumentParser(
    prog='rg-lister',
    description='List the resource groups of an Azure subscription.',
    epilog='Credentials are read from AZURE_CLIENT_ID, AZURE_CLIENT_SECRET, AZURE_TENANT_ID and AZURE_SUBSCRIPTION_ID.')
  rglister_parser.add_argument('--debug', action='store_true', help='Enable debug logging.')
  rglister_parser.add_argument('--show-secrets', action='store_true', help='Print the client secret and the access token instead of masking them.')
  rglister_parser.add_argument('--auth', choices=['az', 'azcli', 'systemassignedmanagedidentity'], default='az', help='Configure how the access token is obtained: "az account get-access-token", AzureCliCredential or a Managed Identity. Default: az')
  rglister_parser.add_argument('--log-output', choices=['stderr', 'defaulthandler'], default='stderr', help='Configure logging.')

  # No subcommand: list with the defaults
  rglister_parser.set_defaults(task_func=do_task_list_rgs, subscription_id=None, output='text', http_timeout=None)

  subparsers = rglister_parser.add_subparsers()
  add_list_rgs_subparser(subparsers)
  add_terraform_env_subparser(subparsers)
  return rglister_parser


def main(arg_string=None) -> int:
  args = mk_parser().parse_args(arg_string)
  setup_logging(args)
  return args.task_func(args)
