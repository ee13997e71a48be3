# Services package init
"""
ContactBook Backend: Services Layer
===================================

What:  Data-access layer sitting between routes (HTTP) and the database.
How:   Services take a session plus plain arguments, run their statement and
       return schema objects or counts. Routes never build SQL.

Service Inventory:
    - ContactService: insert, fetch-one, fetch-all, update and delete contacts
"""
