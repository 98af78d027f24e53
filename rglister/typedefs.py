from typing import Optional, TypeAlias, NamedTuple
import argparse

RunConf: TypeAlias = argparse.Namespace

SubscriptionId: TypeAlias = str
AccessToken: TypeAlias = str


class CredentialSet(NamedTuple):
  client_id: Optional[str] = None
  client_secret: Optional[str] = None
  tenant_id: Optional[str] = None
  subscription_id: Optional[SubscriptionId] = None

  def as_terraform_env(self) -> dict[str, str]:
    """ ARM_* variables as read by the azurerm terraform provider """
    env = {
      'ARM_CLIENT_ID': self.client_id,
      'ARM_CLIENT_SECRET': self.client_secret,
      'ARM_SUBSCRIPTION_ID': self.subscription_id,
      'ARM_TENANT_ID': self.tenant_id,
    }
    return {k: v for k, v in env.items() if v}


class ResourceGroup(NamedTuple):
  id: str    # /subscriptions/GUID/resourceGroups/NAME
  name: str

