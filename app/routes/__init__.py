"""
Products API: Routes Package
============================

Route Inventory:
    - products.py: GET/POST /api/products, GET/PUT/DELETE /api/products/{id}
    - health.py:   GET /health

Routes are thin: they extract the path id and body, call ProductService,
and return its result. Status codes for failures come from the exception
handlers in app.main.
"""
