"""Constants for JWT claim names"""


class TokenClaims:
    """Claim names written into access tokens"""
    SUBJECT = "sub"  # JWT standard claim (subject) holding the user id
    USERNAME = "username"
    ISSUED_AT = "iat"
    EXPIRES_AT = "exp"
