"""
Seed data for profiles.
IDs match the subjects of the demo identities in the identity provider.
"""

PROFILES = [
    {
        "id": "6f1c2a0e-8b1d-4c55-9a51-2d8f0c3e7a01",
        "role": "admin",
        "full_name": "Asha Menon",
        "company_name": "MerchFlow HQ",
    },
    {
        "id": "0b7d4e21-3c9a-4f6e-8d12-5a6b7c8d9e02",
        "role": "vendor",
        "full_name": "Vikram Rao",
        "company_name": "PrintWorks Supplies",
    },
    {
        "id": "9a8b7c6d-5e4f-4a3b-2c1d-0e9f8a7b6c03",
        "role": "dealer",
        "full_name": "Rohan Gupta",
        "company_name": "Gupta Motors",
    },
    {
        "id": "1d2e3f4a-5b6c-4d7e-8f9a-0b1c2d3e4f04",
        "role": "dealer",
        "full_name": "Meera Iyer",
        "company_name": "Iyer Auto Hub",
    },
]
