"""
Products API: Services Layer
============================

Service Inventory:
    - product_validator: Pure field checks for candidate products
    - ProductService: Validated CRUD statements against the products table

Services take the request's AsyncSession as an argument and never touch
HTTP objects; routes translate their results and exceptions into responses.
"""
