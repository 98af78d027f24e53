from typing import Any, List, Optional

import requests

from rglister.errors import DecodeError, ProtocolError, RequestError, TransportError
from rglister.settings import mk_resource_groups_url
from rglister.typedefs import AccessToken, ResourceGroup, SubscriptionId

import logging
logger = logging.getLogger('rglister.resource_groups')


def parse_resource_groups(payload: Any) -> List[ResourceGroup]:
  """
  {"value": [{"id": "/subscriptions/.../resourceGroups/rg1", "name": "rg1", ...}, ...]}
  Extra fields (location, tags, properties) are ignored, order is kept.
  nextLink is not followed.
  """
  if not isinstance(payload, dict) or 'value' not in payload:
    raise DecodeError('response has no "value" field')
  items = payload['value']
  if not isinstance(items, list):
    raise DecodeError('"value" is not a list')

  result = []
  for i, item in enumerate(items):
    if not isinstance(item, dict):
      raise DecodeError('item %d is not an object' % i)
    rg_id, rg_name = item.get('id'), item.get('name')
    if not isinstance(rg_id, str) or not isinstance(rg_name, str):
      raise DecodeError('item %d is missing "id" or "name"' % i)
    result.append(ResourceGroup(id=rg_id, name=rg_name))
  return result


def _get_json(session: requests.Session, subscription_id: SubscriptionId, access_token: AccessToken, timeout: Optional[float]) -> Any:
  url = mk_resource_groups_url(subscription_id)
  headers = {'Authorization': f'Bearer {access_token}'}

  try:
    req = session.prepare_request(requests.Request('GET', url, headers=headers))
  except (requests.exceptions.RequestException, ValueError) as e:
    # InvalidURL, MissingSchema, InvalidHeader (CR/LF in the token)
    raise RequestError('failed to create request: %s' % e) from e

  logger.info('GET %s', url)
  try:
    resp = session.send(req, timeout=timeout)
  except requests.exceptions.RequestException as e:
    raise TransportError('failed to send request: %s' % e) from e

  with resp:
    if resp.status_code != requests.codes.ok:
      raise ProtocolError(resp.status_code, resp.text)
    try:
      return resp.json()
    except ValueError as e:
      raise DecodeError('failed to parse JSON response: %s' % e) from e


def fetch_resource_groups(
    subscription_id: SubscriptionId,
    access_token: AccessToken,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None) -> List[ResourceGroup]:
  """ GET /subscriptions/{subscriptionId}/resourcegroups """
  if session is None:
    with requests.Session() as session:
      payload = _get_json(session, subscription_id, access_token, timeout)
  else:
    payload = _get_json(session, subscription_id, access_token, timeout)

  groups = parse_resource_groups(payload)
  logger.info('Got %d resource groups', len(groups))
  return groups
