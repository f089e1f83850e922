"""
constants.py
--------------------
Shared constants for the icon catalog:
  - category rule table (ordered, first match wins)
  - closed category set and the "Uncategorized" sentinel
  - icon source labels
  - collaborator file locations
  - external classifier defaults
"""

from __future__ import annotations

from typing import Final

from .rules import CategoryRule, exact, prefix, suffix

# Category rule table
#
# Order is significant: classify() returns the first rule whose first
# matching pattern hits. Exclusions keep generic prefixes from swallowing
# identifiers that a more specific rule (earlier or later) owns.

CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        "AI",
        (
            prefix("AI_"),
            prefix("ARTIFICIAL_INTELLIGENCE"),
            *exact("MAGIC_AI", "PENCIL_EDIT_AI", "AI_SCREEN", "AI_IDEA",
                   "AI_CHAT_BUBBLE", "AI_PROGRAMMING"),
        ),
        ("artificial intelligence", "machine learning", "generative", "smart", "auto"),
    ),
    CategoryRule(
        "Arrows",
        (
            prefix("ARROW_"),
            prefix("CHEVRON_"),
            prefix("CIRCLE_ARROW_"),
            *exact("COMPARE_ARROWS", "UNFOLD_MORE"),
        ),
        ("navigation", "direction", "back", "forward", "up", "down", "expand", "collapse"),
    ),
    CategoryRule(
        "E-Commerce",
        (
            prefix("SHOPPING_"),
            prefix("CART_"),
            prefix("STORE_"),
            prefix("SALE_TAG"),
            *exact("HOT_PRICE", "TROLLEY"),
            prefix("PRODUCT", exclude=("PRODUCT_BOX", "PRODUCT_SEARCH")),
            *exact("PRODUCTS", "ORDERS"),
            prefix("BAR_CODE"),
            *exact("QR_CODE"),
            prefix("DISCOUNT_"),
            *exact("TICKET_BAR_CODE", "PIX", "PROMOTION"),
        ),
        ("shop", "buy", "store", "basket", "order", "cart", "barcode"),
    ),
    CategoryRule(
        "Finance",
        (
            prefix("MONEY_"),
            prefix("DOLLAR_"),
            prefix("WALLET"),
            prefix("PAYMENT"),
            *exact("TAXES", "BANK"),
            prefix("COINS_"),
            prefix("CURRENCY_"),
            *exact("CALCULATOR_MONEY"),
            prefix("REVERSE_WITHDRAWAL"),
            *exact("WITHDRAW"),
            prefix("INVOICE"),
            prefix("CREDIT_CARD"),
            *exact("COMPUTER_DOLLAR"),
            prefix("TRADE_"),
            *exact("TRANSACTION_HISTORY", "CARDS"),
        ),
        ("payment", "banking", "currency", "transfer", "withdraw", "money"),
    ),
    CategoryRule(
        "Payment Cards",
        exact(
            "MERCADO_PAGO", "AMAZON_PAY", "GOOGLE_PAY", "PAYPAL", "APPLE_PAY",
            "ELO", "MASTERCARD", "AMERICAN_EXPRESS", "DINERS_CLUB", "CIRRUS",
            "VISA", "HIPERCARD", "JCB", "UNIONPAY", "MAESTRO", "HIPER",
            "DISCOVER", "CVC",
        ),
        ("credit", "debit", "card brand", "payment method"),
    ),
    CategoryRule(
        "Payment Badges",
        (suffix("_BADGE"),),
        ("payment method", "checkout", "badge"),
    ),
    CategoryRule(
        "Users",
        (
            prefix("USER_"),
            *exact("USER"),
            prefix("ACCOUNT_"),
            *exact("PROFILE"),
            prefix("ADD_USER"),
            *exact("MANAGER", "MENTORING"),
        ),
        ("people", "profile", "team", "group", "person", "account"),
    ),
    CategoryRule(
        "Files & Documents",
        (
            prefix("FILE"),
            *exact("EDIT_FILE", "CHECKED_FILE", "ADD_FILE", "SEND_FILE",
                   "SHARE_FILE", "SEARCH_FILE", "ANNEXED_FILE"),
            prefix("IC_"),
            prefix("MEDIA_"),
            prefix("XML_FILE"),
            *exact("GOOGLE_SHEET", "WAVE_FILE", "CHECK_SUCCESS_FILE", "FILE_STAR"),
            prefix("NOTE_"),
            *exact("DOCUMENT_CODE"),
            prefix("FOLDER_"),
            *exact("FOLDER_OPEN", "PDF_ICON", "ATTACHMENT", "LICENSE_ARTICLE"),
        ),
        ("document", "attachment", "upload", "file type"),
    ),
    CategoryRule(
        "Communication",
        (
            prefix("MESSAGE_"),
            prefix("CHAT"),
            prefix("MAIL"),
            *exact("NOTIFICATION"),
            prefix("BELL_"),
            prefix("BUBBLE_CHAT"),
            prefix("DOUBLE_CHAT"),
            prefix("PERSON_CHAT"),
            *exact("HEADSET", "TELEPHONE", "ERROR_BELL"),
        ),
        ("email", "notify", "alert", "inbox", "chat", "message"),
    ),
    CategoryRule(
        "Status & Feedback",
        (
            *exact("CHECK_CIRCLE"),
            prefix("CHECK_MARK"),
            *exact("SIMPLE_CHECK"),
            prefix("ALERT_"),
            prefix("WARNING_"),
            *exact("INFO", "INFO_CIRCLE"),
            prefix("HELP_"),
            *exact("VERIFIED", "HEXAGON_WARNING"),
            prefix("CHECKMARK_"),
            prefix("THUMBS_"),
            prefix("CANCEL_CIRCLE"),
            prefix("PASSPORT_"),
            *exact("CHECK_LIST", "INFORMATIONS"),
        ),
        ("success", "error", "confirm", "validate", "status", "feedback"),
    ),
    CategoryRule(
        "Add & Remove",
        (
            *exact("ADD_CIRCLE", "SIMPLE_ADD"),
            prefix("MINUS_"),
            prefix("DELETE_"),
            prefix("CLOSE_MARK"),
            *exact("SUBNODE_ADD"),
            prefix("TASK_ADD"),
            *exact("PACKAGE_ADD", "PACKAGE_REMOVE", "PROPERTY_DELETE", "ADD_TO_LIST"),
        ),
        ("create", "remove", "cancel", "clear", "add"),
    ),
    CategoryRule(
        "Filter & Sort",
        (
            prefix("FILTER_"),
            prefix("SORTING_"),
            prefix("SORT_"),
            *exact("ORDENATING", "PREFERENCE_HORIZONTAL"),
        ),
        ("order", "ascending", "descending", "organize", "filter"),
    ),
    CategoryRule(
        "Search",
        (
            prefix("SEARCH_", exclude=("SEARCH_FILE",)),
            *exact("SEARCHING"),
            prefix("ZOOM_"),
        ),
        ("find", "lookup", "magnifying glass", "search"),
    ),
    CategoryRule(
        "Settings & Tools",
        (
            *exact("SETTINGS", "SLIDERS_HORIZONTAL", "DASHBOARD_CIRCLE_SETTINGS",
                   "LIST_SETTING", "TIME_SETTING"),
            prefix("COMPUTER_SETTINGS"),
            *exact("TOOLS"),
            prefix("WRENCH_"),
            *exact("PLUG_SOCKET", "WEBHOOK", "CUSTOMIZE"),
        ),
        ("config", "preferences", "gear", "options", "tools"),
    ),
    CategoryRule(
        "Layout & Views",
        (
            prefix("LIST_", exclude=("LIST_CLOCK", "LIST_SETTING")),
            prefix("GRID_"),
            prefix("DASHBOARD_", exclude=("DASHBOARD_CIRCLE",)),
            *exact("TABLE"),
            prefix("COLUMN", exclude=("COLUMN_CHART",)),
            prefix("LAYOUT_"),
            *exact("VIEW_COLUMN"),
            prefix("SIDEBAR_"),
            *exact("SIMPLE_LIST", "COLUMNS"),
            prefix("HORIZONTAL_LIST"),
            prefix("HORIZONTAL_LINES"),
            prefix("CAROUSEL_"),
            prefix("ALIGN_BOX"),
            *exact("TORN_LIST", "MORE_GRID", "INSERT_ROW"),
        ),
        ("view", "display", "board", "grid", "list", "layout"),
    ),
    CategoryRule(
        "Data & Analytics",
        (
            prefix("CHART"),
            prefix("ANALYTICS"),
            *exact("BLOCKCHAIN", "COLUMN_CHART"),
            prefix("DATABASE"),
        ),
        ("graph", "metrics", "statistics", "report", "data", "database"),
    ),
    CategoryRule(
        "Social Media",
        (
            prefix("FACEBOOK"),
            *exact("INSTAGRAM", "YOUTUBE", "LINKEDIN", "WHATSAPP", "WHATSAPP_ICON",
                   "DISCORD", "TIKTOK", "X", "GOOGLE"),
        ),
        ("social", "network", "share"),
    ),
    CategoryRule(
        "Editing",
        (
            prefix("PENCIL", exclude=("PENCIL_EDIT_AI",)),
            prefix("PAINT_"),
            prefix("COPY_"),
            prefix("SHARE_", exclude=("SHARE_FILE",)),
            prefix("DRAG_"),
            prefix("SAVE_"),
            prefix("TEXT_", exclude=("TEXT_NUMBER",)),
            *exact("TEXT", "HTML", "JSON", "SQL", "SOURCE_CODE", "CODE_FOLDER"),
        ),
        ("write", "draw", "duplicate", "clipboard", "edit"),
    ),
    CategoryRule(
        "Logistics",
        (
            prefix("TRUCK"),
            prefix("SHIPPING_"),
            prefix("DELIVERY_"),
            *exact("PACKAGE_MOVING", "PACKAGE_OPEN", "PACKAGE", "BOX", "OPENED_BOX",
                   "SIZE_BOX", "PRODUCT_BOX", "PRODUCT_SEARCH_BOX"),
        ),
        ("transport", "tracking", "shipping", "delivery", "package"),
    ),
    CategoryRule(
        "Branding",
        (
            prefix("ZYDON"),
            *exact("ZOE_AI"),
        ),
        ("logo", "brand", "identity"),
    ),
    CategoryRule(
        "Flags",
        (
            suffix("_FLAG"),
            prefix("FLAG_"),
        ),
        ("country", "language", "locale"),
    ),
    CategoryRule(
        "Security",
        (
            prefix("SECURITY"),
            prefix("LOCK_"),
            *exact("LOCKED", "VIEW_OFF", "AUTHORIZED", "KEY_ACCESS"),
            prefix("SQUARE_LOCK"),
            *exact("ACCESS"),
        ),
        ("privacy", "password", "authentication", "security"),
    ),
    CategoryRule(
        "Media",
        (
            prefix("PLAY_"),
            prefix("PAUSE"),
            prefix("MIC_"),
            *exact("ADD_IMAGE", "INSERT_CENTER_IMAGE", "SEARCH_IMAGE", "PLAY_EXECUTE"),
        ),
        ("audio", "video", "media", "play", "record"),
    ),
    CategoryRule(
        "Time & Calendar",
        (
            prefix("CALENDAR"),
            prefix("SELECT_HOUR"),
            *exact("COUNTER_CLOCK"),
            prefix("CLOCK_"),
            *exact("DATE_TIME", "INTERVAL_DATE", "HOURGLASS", "TIME_LIST", "LIST_CLOCK"),
        ),
        ("date", "time", "schedule", "calendar", "clock"),
    ),
    CategoryRule(
        "Navigation",
        (
            prefix("HOME_"),
            prefix("MENU_"),
            prefix("OPEN_IN_NEW"),
            prefix("LOGOUT_"),
            *exact("DIRECTIONS"),
            prefix("LOCATION_"),
            prefix("EARTH_"),
            *exact("INTERNET", "GLOBAL_ICON"),
        ),
        ("home", "menu", "navigation", "link", "location"),
    ),
    CategoryRule(
        "Product Categories",
        (
            *exact("BONE", "BLENDER", "VEGETARIAN_FOOD"),
            prefix("AUTOMOTIVE_BATTERY"),
            *exact("LAPTOP", "NECKLACE"),
            prefix("VYNIL_"),
            *exact("GAMEBOY"),
            prefix("BLUSH_BRUSH"),
            *exact("RUNNING_SHOES", "BABY_BOY_DRESS"),
            prefix("MEDICINE_"),
            *exact("CRANE"),
            prefix("WARDROBE_"),
            *exact("PERFUME"),
            prefix("LAMP_"),
            *exact("STATIONERY"),
        ),
        ("product category", "industry", "department"),
    ),
    CategoryRule(
        "Development",
        (
            prefix("GITHUB"),
            *exact("REPOSITORY"),
            prefix("COMPUTER_PROGRAMMING"),
            prefix("PUZZLE_STROKE"),
            prefix("CHART_RELATIONSHIP"),
            prefix("FLOW"),
            prefix("SMART_PHONE"),
            *exact("COMPUTER"),
        ),
        ("code", "programming", "development", "api"),
    ),
    CategoryRule(
        "UI Controls",
        (
            prefix("TOGGLE_"),
            prefix("RADIO_BUTTON"),
            *exact("CHECK_BOX", "DROPDOWN", "SQUARE_FILL", "DOT", "CIRCLE"),
            prefix("PERCENT"),
            *exact("DECIMAL", "DECIMAL_INCREASE", "INTEGER_NUMBER", "NUMBER_ONE_OUTLINE",
                   "TEXT_NUMBER_SIGN", "LOW_PRIORITY", "CALCULATE_SIGNS"),
        ),
        ("input", "control", "form", "toggle", "checkbox", "radio"),
    ),
    CategoryRule(
        "Cloud & Transfer",
        (
            prefix("CLOUD_"),
            prefix("DOWNLOAD_"),
            *exact("UPLOAD", "INBOX_DOWNLOAD", "SENT", "LINK_HORIZONTAL"),
        ),
        ("cloud", "download", "upload", "transfer", "sync"),
    ),
    CategoryRule(
        "Business",
        (
            *exact("OFFICE", "CORPORATE", "BUILDING"),
            prefix("FACTORY_"),
            *exact("HAND_BAG_BRIEFCASE", "DISTRIBUTION"),
        ),
        ("business", "company", "office", "enterprise", "corporate"),
    ),
    CategoryRule(
        "Interface",
        (
            *exact(
                "RELOAD_REFRESH", "REFRESH_CHANGE", "EXPAND_FULL_SCREEN",
                "MAXIMIZE_SCREEN", "MINIMIZE_SCREEN", "MORE_OPTIONS_VERTICAL",
                "MORE_03", "MORE", "MORE_BOLD", "CURSOR_IN_WINDOW", "LAYERS",
                "PRINTER", "SUMMATION", "VIEW_ON", "REPEATE_ONE_02", "CLEAN",
                "TOUCH_INTERACTION", "BANNER", "MINI_BANNER", "RULER",
                "CREATIVE_MARKET", "FLASH_ROUNDED", "FLASH_STROKE_ROUNDED",
                "ZAP_ICON", "IDEA", "ROCKET", "REVERSE", "TASK_01", "SAVE_MARK",
            ),
            prefix("FAVOURITE"),
            *exact("STAR", "STAR_02"),
        ),
        ("interface", "action", "ui", "interaction"),
    ),
)

if len({rule.name for rule in CATEGORY_RULES}) != len(CATEGORY_RULES):
    raise ValueError("CATEGORY_RULES contains duplicate category names")

# Closed label space shared by the rule table and the external classifier
VALID_CATEGORIES: frozenset[str] = frozenset(rule.name for rule in CATEGORY_RULES)

UNCATEGORIZED: Final[str] = "Uncategorized"

# Suggested to the external classifier when nothing else fits
FALLBACK_CATEGORY: Final[str] = "Interface"

# Icon rendering source labels
SOURCE_LIBRARY: Final[str] = "library"
SOURCE_CUSTOM: Final[str] = "custom"
SOURCE_UNKNOWN: Final[str] = "unknown"

# Collaborator file locations

# Relative to the design-system checkout
ENUM_SOURCE_RELPATH: Final[str] = "src/types/icon.ts"
ICON_COMPONENT_RELPATH: Final[str] = "src/components/Icon/index.tsx"

# Relative to this repository, used when no checkout is present
ENUM_PACKAGE_RELPATH: Final[str] = "node_modules/@zydon/common/dist/types/icon.d.ts"

DEFAULT_COLLABORATOR_DIRNAME: Final[str] = "common-react"
CATALOG_RELPATH: Final[str] = "public/icons-metadata.json"

# Icon component parsing
ICON_LIBRARY_PACKAGE: Final[str] = "hugeicons-react"
ASSETS_IMPORT_PREFIX: Final[str] = "assets/"
ENUM_TYPE_NAME: Final[str] = "IconEnum"

# External classifier defaults
CLASSIFIER_COMMAND: Final[str] = "gemini"
CLASSIFIER_MODEL: Final[str] = "gemini-2.0-flash-lite"
CLASSIFIER_TIMEOUT_S: Final[float] = 120.0
