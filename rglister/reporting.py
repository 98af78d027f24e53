import json
import sys
from typing import List, TextIO

from rglister.typedefs import AccessToken, ResourceGroup, SubscriptionId
import rglister.settings as S


def print_subscription_id(subscription_id: SubscriptionId, out: TextIO = sys.stdout):
  print('Subscription ID: %s' % subscription_id, file=out)


def print_access_token(access_token: AccessToken, show_secrets=False, out: TextIO = sys.stdout):
  print('Access Token: %s' % (access_token if show_secrets else S.MASKED), file=out)


def report_resource_groups(groups: List[ResourceGroup], out: TextIO = sys.stdout):
  print(S.RESOURCE_GROUPS_BANNER, file=out)
  for count, rg in enumerate(groups, start=1):
    print('%d. Name: %s' % (count, rg.name), file=out)
    print('   ID: %s' % rg.id, file=out)


def report_resource_groups_json(groups: List[ResourceGroup], out: TextIO = sys.stdout):
  # Same envelope as the management API
  json.dump({'value': [rg._asdict() for rg in groups]}, out, indent=2)
  out.write('\n')
