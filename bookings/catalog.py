from decimal import Decimal

# name -> (price, duration)
SERVICE_CATALOG = {
    "Swedish Massage": (Decimal("450.00"), "60 min"),
    "Deep Tissue Massage": (Decimal("550.00"), "60 min"),
    "Hot Stone Massage": (Decimal("650.00"), "75 min"),
    "Aromatherapy Massage": (Decimal("500.00"), "60 min"),
    "Back, Neck & Shoulders": (Decimal("300.00"), "30 min"),
    "Classic Facial": (Decimal("400.00"), "45 min"),
    "Manicure": (Decimal("220.00"), "40 min"),
    "Pedicure": (Decimal("260.00"), "45 min"),
}


def catalog_items():
    return [
        {"name": name, "price": price, "duration": duration}
        for name, (price, duration) in SERVICE_CATALOG.items()
    ]


def lookup_services(names):
    """
    Resolve selected service names against the catalog.
    Returns (items, unknown_names); duplicates are kept once, in catalog order.
    """
    wanted = {n.strip() for n in names if n and n.strip()}
    unknown = sorted(n for n in wanted if n not in SERVICE_CATALOG)
    items = [item for item in catalog_items() if item["name"] in wanted]
    return items, unknown


def total_for(items):
    return sum((item["price"] for item in items), Decimal("0.00"))
