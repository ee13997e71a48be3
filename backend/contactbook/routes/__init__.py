# Routes package init
"""
ContactBook Backend: API Routes Package
=======================================

Route Inventory:
    - contacts.py:  POST   /api/contacts          (create)
                    GET    /api/contacts          (list)
                    GET    /api/contacts/{id}     (get one)
                    PUT    /api/contacts/{id}     (update)
                    DELETE /api/contacts/{id}     (delete)
    - health.py:    GET    /health                (service health check)

Routes stay thin: extract path and body, call the service, return the
response model. SQL lives in the services package.
"""
