"""Translation catalog for authentication error messages."""

from __future__ import annotations

from mojauth.i18n.locale import DEFAULT_LOCALE, normalize_locale

_CATALOG: dict[str, dict[str, str]] = {
    "en": {
        "auth.method_not_allowed.title": "Internal Error:<br>Method Not Allowed",
        "auth.method_not_allowed.desc": "Method not allowed. Please report this error.",
        "auth.not_found.title": "Internal Error:<br>Endpoint Not Found",
        "auth.not_found.desc": "The authentication endpoint was not found. Please report this issue.",
        "auth.user_migrated.title": "Error During Login:<br>Account Migrated",
        "auth.user_migrated.desc": "This account has been migrated. Sign in with the email address of the migrated account.",
        "auth.invalid_credentials.title": "Error During Login:<br>Invalid Credentials",
        "auth.invalid_credentials.desc": "The email or password you've entered is incorrect. Please try again.",
        "auth.rate_limited.title": "Error During Login:<br>Too Many Attempts",
        "auth.rate_limited.desc": "There have been too many login attempts with this account recently. Please try again later.",
        "auth.invalid_token.title": "Error During Login:<br>Invalid Token",
        "auth.invalid_token.desc": "The provided access token is invalid.",
        "auth.access_token_has_profile.title": "Error During Login:<br>Token Has Profile",
        "auth.access_token_has_profile.desc": "Access token already has a profile assigned. Selecting profiles is not implemented yet.",
        "auth.credentials_missing.title": "Error During Login:<br>Credentials Missing",
        "auth.credentials_missing.desc": "Username/password was not submitted or password is less than 3 characters.",
        "auth.invalid_salt_version.title": "Error During Login:<br>Invalid Salt Version",
        "auth.invalid_salt_version.desc": "Invalid salt version.",
        "auth.unsupported_media_type.title": "Internal Error:<br>Unsupported Media Type",
        "auth.unsupported_media_type.desc": "Unsupported media type. Please report this error.",
        "auth.gone.title": "Error During Login:<br>Account Unavailable",
        "auth.gone.desc": "This account or resource no longer exists on the authentication servers.",
        "auth.unreachable.title": "Error During Login:<br>Unreachable",
        "auth.unreachable.desc": "Unable to reach the authentication servers. Ensure that they are online and you are connected to the internet.",
        "auth.not_paid.title": "Error During Login:<br>Game Not Purchased",
        "auth.not_paid.desc": "The account you are logging into has not purchased a copy of the game.",
        "auth.unknown.title": "Unknown Error During Login",
        "auth.unknown.desc": "An unknown error has occurred. Please contact an administrator.",
    },
    "fr": {
        "auth.method_not_allowed.title": "Erreur interne : <br>Méthode non autorisée",
        "auth.method_not_allowed.desc": "Méthode non autorisée. Veuillez signaler cette erreur.",
        "auth.not_found.title": "Erreur interne : <br>Terminaison introuvable",
        "auth.not_found.desc": "Le point de terminaison d'authentification n'a pas été trouvé. Veuillez signaler ce problème",
        "auth.user_migrated.title": "Erreur lors de la connexion :<br>Compte migré",
        "auth.user_migrated.desc": "Ce compte a été migré. Connectez-vous avec l'adresse e-mail du compte migré.",
        "auth.invalid_credentials.title": "Erreur lors de la connexion:<br>Login invalides",
        "auth.invalid_credentials.desc": "L'e-mail ou le mot de passe que vous avez saisi est incorrect. Veuillez réessayer.",
        "auth.rate_limited.title": "Erreur pendant la connexion : Trop de tentatives.",
        "auth.rate_limited.desc": "Il y a eu trop de tentatives de connexion avec ce compte récemment. Veuillez réessayer plus tard.",
        "auth.invalid_token.title": "Erreur pendant la connexion : Token invalide.",
        "auth.invalid_token.desc": "Le token d'accès fourni n'est pas valide",
        "auth.credentials_missing.title": "Erreur lors de la connexion : <br>Login manquants",
        "auth.credentials_missing.desc": "Le nom d'utilisateur/mot de passe n'a pas été soumis ou le mot de passe comporte moins de 3 caractères.",
        "auth.invalid_salt_version.title": "Erreur lors de la connexion:<br>Invalid Salt Version",
        "auth.invalid_salt_version.desc": "Version de salt invalide.",
        "auth.unsupported_media_type.title": "Erreur interne : <br>Type de média non supporté",
        "auth.unsupported_media_type.desc": "Type de média non supporté. Veuillez signaler cette erreur.",
        "auth.gone.title": "Erreur lors de la connexion :<br>Compte indisponible",
        "auth.gone.desc": "Ce compte ou cette ressource n'existe plus sur les serveurs d'authentification.",
        "auth.unreachable.title": "Erreur lors de la connexion:<br>Inaccessible",
        "auth.unreachable.desc": "Impossible d'atteindre les serveurs d'authentification. Assurez-vous qu'ils sont en ligne et que vous êtes connecté à l'Internet.",
        "auth.not_paid.title": "Erreur lors de la connexion :<br>Jeu non acheté",
        "auth.not_paid.desc": "Le compte avec lequel vous vous connectez n'a pas acheté le jeu.",
        "auth.unknown.title": "Erreur inconnue pendant la connexion",
        "auth.unknown.desc": "Une erreur inconnue s'est produite, merci de contacter un Administrateur.",
    },
}


def available_locales() -> tuple[str, ...]:
    return tuple(_CATALOG)


def has_key(key: str) -> bool:
    """Return True when the English catalog defines ``key``."""
    return key in _CATALOG[DEFAULT_LOCALE]


def tr(key: str, *, locale: str | None = None) -> str:
    """Translate key to locale, falling back to English, then to the key."""
    lang = normalize_locale(locale)
    return _CATALOG.get(lang, {}).get(key) or _CATALOG[DEFAULT_LOCALE].get(key) or key
