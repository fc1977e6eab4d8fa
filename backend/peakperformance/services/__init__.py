# Services package init
"""
PeakPerformance Backend — Services Layer
==========================================

What:  Business logic between routes (HTTP) and the database (persistence).
Why:   Routes handle HTTP; services decide what a request means and which
       outcome (record, 400, 404, 500) it produces.

Service Inventory:
    - ResourceService: Generic list/get/create/update/delete for one table
    - UserService: ResourceService plus bcrypt hashing of `contraseña`
    - catalog.build_resource_services(): The nine configured instances

Services are stateless: the AsyncSession is passed into each call, so they
can be unit-tested with a mocked session and no HTTP at all.
"""
