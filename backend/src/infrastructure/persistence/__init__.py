"""
Persistence Layer - Prisma (PostgreSQL) implementations of the repository ports.

Modules are imported by their full path (see setup/ioc/prisma_provider.py):
the Prisma repositories need a generated client (`prisma generate`), while
notification_mapping.py has no such requirement.
"""
