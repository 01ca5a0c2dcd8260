# bank_api/models/account.py
"""
Database model for bank accounts.
Maps the ``accounts`` table: internal row id, owner name, the externally
visible account number, the password hash, balance and creation time.
"""
from tortoise import fields, models

class Account(models.Model):
    """
    Account database model.

    Security:
    - Password is stored as an argon2 hash, never as plain text
    - ``encrypted_password`` is never serialized into API responses

    Invariants:
    - ``number`` is unique and assigned once at creation
    - Rows are not mutated by any route; balance changes are not implemented
    """
    id = fields.IntField(pk=True)  # Auto-incrementing internal identifier
    first_name = fields.CharField(max_length=50)
    last_name = fields.CharField(max_length=50)
    number = fields.BigIntField(unique=True)  # Account number (64-bit, unique, not null)
    encrypted_password = fields.CharField(max_length=255)
    balance = fields.FloatField(default=0.0)
    created_at = fields.DatetimeField(auto_now_add=True)  # Set explicitly by new_account; auto-filled otherwise

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "accounts"

    def __str__(self) -> str:
        return f"Account(id={self.id}, number={self.number})"
