"""Library Seating package.

This package is organized by feature modules (members, rooms, attendance,
dashboard) with a thin Flask controller layer and service/repository layers
underneath. The attendance module holds the check-in/check-out engine and
the dynamic seat allocator.
"""
