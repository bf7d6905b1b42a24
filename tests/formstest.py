"""
Shared form definitions for all test files.

Collects the login, signup and nested player forms used across the test
suite so each test file exercises the same definitions.
"""

from dataclasses import dataclass

from forma import (
    Err,
    FieldNames,
    Ok,
    combine,
    empty,
    not_empty,
    pure,
)

# =============================================================================
# Login
# =============================================================================

LOGIN_FIELDS = FieldNames("username", "password", "remember_me")


@dataclass
class LoginForm:
    username: str
    password: str
    remember_me: bool


login_form = combine(
    LoginForm,
    LOGIN_FIELDS.field("username", str, not_empty()),
    LOGIN_FIELDS.field("password", str, not_empty()),
    empty() | LOGIN_FIELDS.field_("remember_me", bool) | pure(True),
)


# =============================================================================
# Signup (cross-field check)
# =============================================================================

SIGNUP_FIELDS = FieldNames("username", "password", "password_confirmation")


@dataclass
class SignupForm:
    username: str
    password: str


def passwords_match(pair):
    a, b = pair
    if a == b:
        return Ok(a)
    return Err("Passwords don't match!")


signup_form = combine(
    SignupForm,
    SIGNUP_FIELDS.field("username", str, not_empty()),
    SIGNUP_FIELDS.with_check(
        "password_confirmation",
        passwords_match,
        combine(
            lambda a, b: (a, b),
            SIGNUP_FIELDS.field("password", str, not_empty()),
            SIGNUP_FIELDS.field("password_confirmation", str, not_empty()),
        ),
    ),
)


# =============================================================================
# Nested player
# =============================================================================

PLAYER_FIELDS = FieldNames("player", "name", "gold")


@dataclass
class PlayerForm:
    name: str
    gold: int


nested_form = PLAYER_FIELDS.sub_parser(
    "player",
    combine(
        PlayerForm,
        PLAYER_FIELDS.field("name", str, not_empty()),
        PLAYER_FIELDS.field_("gold", int),
    ),
)
