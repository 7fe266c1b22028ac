"""
Application constants for the Autopartes storefront core

Centralizes magic numbers and hard-coded values shared across layers.
"""

from typing import Final


# Logging configuration constants
class LoggingSettings:
    """Logging file sizes and rotation settings"""

    MAX_LOG_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10MB
    SECURITY_LOG_FILE_SIZE: Final[int] = 5 * 1024 * 1024  # 5MB

    MAIN_LOG_BACKUP_COUNT: Final[int] = 10
    ERROR_LOG_BACKUP_COUNT: Final[int] = 10
    SECURITY_LOG_BACKUP_COUNT: Final[int] = 10


class FileSettings:
    """Log file names"""

    MAIN_LOG_FILE: Final[str] = "storefront.log"
    ERROR_LOG_FILE: Final[str] = "errors.log"
    SECURITY_LOG_FILE: Final[str] = "security.log"


class ApiPaths:
    """Relative paths of the storefront API endpoints"""

    PRODUCTS: Final[str] = "products"
    PRODUCT: Final[str] = "products/{product_id}"
    ORDERS: Final[str] = "orders"
    USER_ORDERS: Final[str] = "orders/user/{user_id}"
    PAYMENT_INTENTS: Final[str] = "payment-intents"
    WHOLESALE_AUTH: Final[str] = "auth/wholesale"
    GAME_RESULT: Final[str] = "games/result"


class ClientStateKeys:
    """Keys under which the session is persisted in the client state store"""

    CART: Final[str] = "cart"
    USER: Final[str] = "user"
    IS_WHOLESALE_USER: Final[str] = "is_wholesale_user"
    USER_POINTS: Final[str] = "user_points"
    CREDITED_REFERENCES: Final[str] = "credited_references"
    LAST_VISIT_DATE: Final[str] = "last_visit_date"
    SELECTED_PAYMENT: Final[str] = "selected_payment"
    ACTIVITY: Final[str] = "activity"


class RewardSettings:
    """Fixed point amounts for the minigames"""

    TRIVIA_POINTS: Final[int] = 50
    PUZZLE_POINTS: Final[int] = 75
    PUZZLE_ANSWER: Final[int] = 8  # 2 + 2 x 3
    SOCIAL_SHARE_POINTS: Final[int] = 25
    ROULETTE_PRIZES: Final[tuple[int, ...]] = (10, 25, 50, 100, 5)


class VipLevels:
    """Point thresholds and discount percentages of the VIP ladder (highest first)"""

    LEVELS: Final[tuple[tuple[str, int, int], ...]] = (
        ("ELITE", 10000, 15),
        ("PREMIUM", 5000, 10),
        ("VIP", 1000, 5),
    )


class ValidationRules:
    """Minimum lengths for checkout and wholesale form fields"""

    MIN_NAME_LENGTH: Final[int] = 2
    MIN_PHONE_LENGTH: Final[int] = 10
    MIN_ADDRESS_LENGTH: Final[int] = 10
    MIN_CITY_LENGTH: Final[int] = 2
    EMAIL_PATTERN: Final[str] = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"



class Achievements:
    """Medals (activity counters) and trophies (points balance) of the loyalty program"""

    # (id, name, counter, target, rarity, points)
    MEDALS: Final[tuple[tuple[str, str, str, int, str, int], ...]] = (
        ("visitante_novato", "Visitante Novato", "visits", 5, "bronze", 50),
        ("visitante_regular", "Visitante Regular", "visits", 30, "silver", 200),
        ("visitante_dedicado", "Visitante Dedicado", "visits", 100, "gold", 500),
        ("primera_compra", "Primera Compra", "purchases", 1, "bronze", 100),
        ("comprador_frecuente", "Comprador Frecuente", "purchases", 10, "silver", 300),
        ("maestro_jugador", "Maestro Jugador", "games_played", 50, "gold", 400),
        ("influencer_social", "Influencer Social", "shares", 25, "silver", 250),
    )
    # (id, name, points target, tier)
    TROPHIES: Final[tuple[tuple[str, str, int, str], ...]] = (
        ("coleccionista_puntos", "Coleccionista de Puntos", 10000, "legendary"),
        ("cliente_vip", "Cliente VIP", 5000, "epic"),
        ("estrella_ascendente", "Estrella Ascendente", 1000, "rare"),
    )
