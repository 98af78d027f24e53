import logging

from rglister.typedefs import RunConf

def setup_logging(args: RunConf):
  level = logging.DEBUG if args.debug else logging.INFO
  logging.basicConfig(encoding='utf-8', level=level)
  if args.log_output != 'defaulthandler':
    logging.getLogger('azure.identity._internal.decorators').setLevel(logging.WARN)
    logging.getLogger('azure.core.pipeline.policies.http_logging_policy').setLevel(logging.WARN)
    logging.getLogger('urllib3.connectionpool').setLevel(logging.WARN)
    rootlogger = logging.getLogger()
    rootlogger.handlers = []
    rootlogger.setLevel(level)
    # StreamHandler writes to stderr, stdout is left for the report
    ch = logging.StreamHandler()
    ch.setLevel(level)
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    ch.setFormatter(formatter)
    rootlogger.addHandler(ch)


ENV_CLIENT_ID = 'AZURE_CLIENT_ID'
ENV_CLIENT_SECRET = 'AZURE_CLIENT_SECRET'
ENV_TENANT_ID = 'AZURE_TENANT_ID'
ENV_SUBSCRIPTION_ID = 'AZURE_SUBSCRIPTION_ID'

MANAGEMENT_ENDPOINT = 'https://management.azure.com'
MANAGEMENT_SCOPE = 'https://management.azure.com/.default'
API_VERSION = '2022-01-01'

mk_resource_groups_url = lambda subscription_id, api_version=API_VERSION: \
  f'{MANAGEMENT_ENDPOINT}/subscriptions/{subscription_id}/resourcegroups?api-version={api_version}'

mk_az_token_cmd = lambda subscription_id: [
  'az', 'account', 'get-access-token',
  '--query', 'accessToken',
  '--output', 'tsv',
  '--subscription', subscription_id
]

MASKED = '****'

RESOURCE_GROUPS_BANNER = '#' * 43 + 'Resource Groups' + '#' * 50
