"""Inventory loaded at process start."""

SEED_ITEMS: tuple[dict, ...] = (
    {
        "id": 1,
        "name": "Laptop",
        "status": "available",
        "quantity": 10,
        "category": "Electronics",
        "supplier": "Tech Corp",
        "weight": 2.5,
    },
    {
        "id": 2,
        "name": "Desk Chair",
        "status": "reserved",
        "quantity": 5,
        "category": "Furniture",
        "supplier": "Office Supply Co.",
        "weight": 15.0,
    },
    {
        "id": 3,
        "name": "Printer Paper",
        "status": "available",
        "quantity": 100,
        "category": "Office Supplies",
        "supplier": "Paper Goods Ltd.",
        "weight": 1.0,
    },
    {
        "id": 4,
        "name": "Smartphone",
        "status": "out of stock",
        "quantity": 0,
        "category": "Electronics",
        "supplier": "Mobile World",
        "weight": 0.3,
    },
    {
        "id": 5,
        "name": "Drill Machine",
        "status": "available",
        "quantity": 7,
        "category": "Tools",
        "supplier": "Hardware Inc.",
        "weight": 3.2,
    },
    {
        "id": 6,
        "name": "Refrigerator",
        "status": "reserved",
        "quantity": 3,
        "category": "Appliances",
        "supplier": "Home Essentials",
        "weight": 60.0,
    },
    {
        "id": 7,
        "name": "Cooking Oil",
        "status": "available",
        "quantity": 50,
        "category": "Groceries",
        "supplier": "Food Distributors",
        "weight": 0.9,
    },
    {
        "id": 8,
        "name": "T-Shirts",
        "status": "available",
        "quantity": 80,
        "category": "Clothing",
        "supplier": "Fashion House",
        "weight": 0.2,
    },
    {
        "id": 9,
        "name": "LED Bulb",
        "status": "available",
        "quantity": 30,
        "category": "Lighting",
        "supplier": "Bright Lights",
        "weight": 0.15,
    },
    {
        "id": 10,
        "name": "Sofa Set",
        "status": "reserved",
        "quantity": 2,
        "category": "Furniture",
        "supplier": "Living Space",
        "weight": 45.0,
    },
)
