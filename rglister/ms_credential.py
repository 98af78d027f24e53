from azure.core.exceptions import ClientAuthenticationError
from azure.identity import AzureCliCredential
from azure.identity import ManagedIdentityCredential

from rglister.azcli_query import get_access_token
from rglister.errors import ConfigurationError, TokenFetchError
from rglister.typedefs import AccessToken, CredentialSet, RunConf
import rglister.settings as S


def get_ms_credential(args: RunConf, creds: CredentialSet):
    if args.auth == 'azcli':
        return AzureCliCredential(tenant_id=creds.tenant_id or None)
    elif args.auth == 'systemassignedmanagedidentity':
        return ManagedIdentityCredential()
    else:
        raise ConfigurationError('Unknown auth mode: %s' % args.auth)


def fetch_token(args: RunConf, creds: CredentialSet, subscription_id: str) -> AccessToken:
    if args.auth == 'az':
        return get_access_token(subscription_id)

    try:
        credential = get_ms_credential(args, creds)
        # CredentialUnavailableError is a ClientAuthenticationError
        return credential.get_token(S.MANAGEMENT_SCOPE).token
    except ClientAuthenticationError as e:
        raise TokenFetchError(e.message) from e
    except ValueError as e:
        # e.g. AzureCliCredential rejects a malformed tenant id
        raise TokenFetchError(str(e)) from e
