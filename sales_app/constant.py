"""Editable static reference data: locations, catalog seed, option lists."""

from __future__ import annotations

LOCATION_DATA: dict[str, dict[str, list[str]]] = {
    "Venezuela": {
        "Distrito Capital": ["Caracas"],
        "Miranda": ["Los Teques", "Guarenas", "Guatire", "Petare", "Baruta"],
        "Merida": ["Merida"],
        "Carabobo": ["Valencia", "Puerto Cabello", "Naguanagua"],
        "Zulia": ["Maracaibo", "Cabimas", "Ciudad Ojeda"],
        "Aragua": ["Maracay", "La Victoria", "Turmero"],
        "Lara": ["Barquisimeto", "Cabudare", "El Tocuyo"],
        "Táchira": ["San Cristóbal", "Táriba", "Rubio"],
        "Anzoátegui": ["Barcelona", "Puerto La Cruz", "El Tigre"],
        "Bolívar": ["Ciudad Bolívar", "Puerto Ordaz", "Upata"],
        "Falcón": ["Coro", "Punto Fijo", "La Vela de Coro"],
    },
    "Colombia": {
        "Cundinamarca": ["Bogotá", "Soacha", "Zipaquirá", "Facatativá"],
        "Antioquia": ["Medellín", "Bello", "Itagüí", "Envigado"],
        "Valle del Cauca": ["Cali", "Palmira", "Buenaventura", "Tuluá"],
        "Atlántico": ["Barranquilla", "Soledad", "Malambo", "Puerto Colombia"],
        "Santander": ["Bucaramanga", "Floridablanca", "Girón", "Piedecuesta"],
        "Bolívar": ["Cartagena", "Magangué", "Turbaco", "Arjona"],
        "Norte de Santander": ["Cúcuta", "Villa del Rosario", "Los Patios"],
        "Córdoba": ["Montería", "Lorica", "Cereté", "Sahagún"],
        "Tolima": ["Ibagué", "Espinal", "Melgar", "Honda"],
        "Huila": ["Neiva", "Pitalito", "Garzón", "La Plata"],
    },
    "El Salvador": {
        "San Salvador": ["San Salvador", "Mejicanos", "Soyapango", "Delgado"],
        "La Libertad": ["Santa Tecla", "Antiguo Cuscatlán", "Quezaltepeque"],
        "San Miguel": ["San Miguel", "Moncagua", "Quelepa"],
        "Santa Ana": ["Santa Ana", "Chalchuapa", "Metapán"],
        "Sonsonate": ["Sonsonate", "Acajutla", "Izalco"],
        "Ahuachapán": ["Ahuachapán", "Atiquizaya", "Tacuba"],
        "Usulután": ["Usulután", "Jiquilisco", "Berlín"],
        "La Paz": ["Zacatecoluca", "Olocuilta", "San Pedro Masahuat"],
        "Chalatenango": ["Chalatenango", "Nueva Concepción", "La Palma"],
        "Cuscatlán": ["Cojutepeque", "Suchitoto", "San Pedro Perulapán"],
    },
}

COUNTRY_PREFIXES: dict[str, str] = {
    "Venezuela": "VE",
    "Colombia": "CO",
    "El Salvador": "SV",
}
DEFAULT_COUNTRY_PREFIX = "XX"

ORDER_TYPES: dict[str, str] = {
    "immediate": "Immediate",
    "reservation": "Reservation",
}

SALES_CHANNELS: dict[str, str] = {
    "online": "Online",
    "store": "Physical store",
    "phone": "Phone",
    "whatsapp": "WhatsApp",
    "social": "Social media",
    "referral": "Referral",
}

PAYMENT_METHODS: dict[str, str] = {
    "cash": "Cash",
    "credit_card": "Credit card",
    "debit_card": "Debit card",
    "bank_transfer": "Bank transfer",
    "mobile_payment": "Mobile payment",
    "check": "Check",
    "crypto": "Cryptocurrency",
    "financing": "Financing",
}

STEP_TITLES: dict[int, str] = {
    1: "Customer",
    2: "Products / Services",
    3: "Review and confirm",
}

_EFFECTIVE = "2024-01-01"

# Raw catalog seed consumed by sales_app.data (which wraps these into Product instances).
CATALOG_SEED: list[dict[str, object]] = [
    {
        "code": "PROD001",
        "description": "Producto Premium A",
        "dimension": "30x20x10 cm",
        "subcategory": "Premium",
        "category": "Electrónicos",
        "prices": {"Venezuela": 150, "Colombia": 180, "El Salvador": 160},
        "costs": {"Venezuela": 100, "Colombia": 120, "El Salvador": 110},
        "effective_date": _EFFECTIVE,
    },
    {
        "code": "PROD002",
        "description": "Producto Estándar B",
        "dimension": "25x15x8 cm",
        "subcategory": "Estándar",
        "category": "Hogar",
        "prices": {"Venezuela": 80, "Colombia": 95, "El Salvador": 85},
        "costs": {"Venezuela": 50, "Colombia": 60, "El Salvador": 55},
        "effective_date": _EFFECTIVE,
    },
    {
        "code": "PROD003",
        "description": "Colchon",
        "dimension": "25x15x8 cm",
        "subcategory": "Estándar",
        "category": "Hogar",
        "prices": {"Venezuela": 380, "Colombia": 395, "El Salvador": 385},
        "costs": {"Venezuela": 150, "Colombia": 160, "El Salvador": 155},
        "effective_date": _EFFECTIVE,
    },
]

MOCK_USERS_SEED: list[dict[str, str]] = [
    {"id": "1", "email": "admin@boxisleep.com", "password": "admin123", "name": "Administrador"},
    {"id": "2", "email": "user@boxisleep.com", "password": "user123", "name": "Usuario Demo"},
]
