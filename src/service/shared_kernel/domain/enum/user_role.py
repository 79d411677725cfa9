from enum import StrEnum


class UserRole(StrEnum):
    ADMIN = 'admin'
    STAFF = 'staff'
    CUSTOMER = 'customer'
