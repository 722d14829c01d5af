"""Localized user-facing messages.

Errors carry a message key plus parameters; the interface layer renders
them for the request's locale with :func:`translate`.
"""

DEFAULT_LOCALE = "en"

CATALOG: dict[str, dict[str, str]] = {
    "en": {
        # Request shape
        "invalidReqParams": "Invalid request parameters.",
        "canOnlyInviteEmailUuid": "Can only invite using uuids or emails.",
        "uuidsMustBeAnArray": "User ID invites must be an array.",
        "emailsMustBeAnArray": "Email address invites must be an array.",
        "inviteMissingEmail": "Missing email address in invite.",
        "canOnlyInviteMaxInvites": "You can only invite \"{maxInvites}\" at a time",
        # Lookups
        "userWithIDNotFound": "User with id \"{userId}\" not found.",
        "userNotFound": "User not found.",
        "groupNotFound": "Group not found or you don't have access.",
        # Invitation and membership rules
        "userAlreadyInvitedToGroup": "User already invited to this group.",
        "userAlreadyPendingInvitation": "User already pending invitation.",
        "userAlreadyInGroup": "User already in that group.",
        "userAlreadyInAParty": "User already in a party.",
        "messageGroupRequiresInvite": "Can't join a group you're not invited to.",
        "messageGroupAlreadyInParty": "Already in a party, try refreshing.",
        "messageInsufficientGems": "Not enough gems!",
        # Accounts
        "usernameTaken": "Username already taken.",
        "emailTaken": "Email address is already used in an account.",
        "missingAuthToken": "Missing authentication token.",
        "invalidCredentials": "There is no account that uses those credentials.",
        "invalidGroupInvite": "The group invitation link is invalid or has expired.",
    },
    "de": {
        "invalidReqParams": "Ungültige Anfrageparameter.",
        "canOnlyInviteEmailUuid": "Einladungen nur über Benutzer-IDs oder E-Mail-Adressen möglich.",
        "uuidsMustBeAnArray": "Benutzer-ID-Einladungen müssen eine Liste sein.",
        "emailsMustBeAnArray": "E-Mail-Einladungen müssen eine Liste sein.",
        "inviteMissingEmail": "In der Einladung fehlt die E-Mail-Adresse.",
        "canOnlyInviteMaxInvites": "Du kannst nur \"{maxInvites}\" auf einmal einladen",
        "userWithIDNotFound": "Benutzer mit der ID \"{userId}\" nicht gefunden.",
        "userNotFound": "Benutzer nicht gefunden.",
        "groupNotFound": "Gruppe nicht gefunden oder kein Zugriff.",
        "userAlreadyInvitedToGroup": "Benutzer wurde bereits in diese Gruppe eingeladen.",
        "userAlreadyPendingInvitation": "Benutzer hat bereits eine offene Einladung.",
        "userAlreadyInGroup": "Benutzer ist bereits in dieser Gruppe.",
        "userAlreadyInAParty": "Benutzer ist bereits in einer Party.",
        "messageGroupRequiresInvite": "Du kannst keiner Gruppe beitreten, zu der du nicht eingeladen wurdest.",
        "messageGroupAlreadyInParty": "Bereits in einer Party, versuche neu zu laden.",
        "messageInsufficientGems": "Nicht genug Edelsteine!",
    },
}


def resolve_locale(accept_language: str | None) -> str:
    """Pick a supported locale from an Accept-Language header value.

    Only the first language tag is considered; region subtags are dropped.
    """
    if not accept_language:
        return DEFAULT_LOCALE

    first = accept_language.split(",")[0].split(";")[0].strip()
    language = first.split("-")[0].lower()
    return language if language in CATALOG else DEFAULT_LOCALE


def translate(key: str, locale: str = DEFAULT_LOCALE, **params: object) -> str:
    """Render message ``key`` for ``locale``.

    Falls back to the default locale, then to the key itself.
    """
    template = CATALOG.get(locale, {}).get(key) or CATALOG[DEFAULT_LOCALE].get(key)
    if template is None:
        return key
    return template.format(**params) if params else template
