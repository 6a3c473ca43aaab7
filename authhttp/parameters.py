"""
OAuth2 vocabulary shared by requests and response classification
"""


class ParameterKey:
    """Request parameter names sent to the authorization server"""

    CLIENT_ID = "client_id"
    CHALLENGE_TYPE = "challenge_type"
    GRANT_TYPE = "grant_type"
    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"
    SCOPE = "scope"
    CREDENTIAL_TOKEN = "credential_token"
    OOB_CODE = "oob"
    OTP = "otp"
    ATTRIBUTES = "attributes"
    SIGN_IN_SLT = "signin_slt"
    SIGN_UP_TOKEN = "signup_token"
    PASSWORD_RESET_TOKEN = "password_reset_token"
    PASSWORD_SUBMIT_TOKEN = "password_submit_token"
    NEW_PASSWORD = "new_password"
    CLIENT_INFO = "client_info"
    REFRESH_TOKEN = "refresh_token"


# Values that should never appear unmasked in logs
SENSITIVE_PARAMETERS = frozenset(
    {
        ParameterKey.PASSWORD,
        ParameterKey.NEW_PASSWORD,
        ParameterKey.OOB_CODE,
        ParameterKey.OTP,
        ParameterKey.CREDENTIAL_TOKEN,
        ParameterKey.SIGN_IN_SLT,
        ParameterKey.SIGN_UP_TOKEN,
        ParameterKey.PASSWORD_RESET_TOKEN,
        ParameterKey.PASSWORD_SUBMIT_TOKEN,
        ParameterKey.REFRESH_TOKEN,
    }
)

OAUTH2_ERROR_CODES = frozenset(
    {
        "invalid_request",
        "invalid_client",
        "invalid_grant",
        "expired_token",
        "unsupported_challenge_type",
        "invalid_scope",
        "authorization_pending",
        "slow_down",
        "credential_required",
    }
)
