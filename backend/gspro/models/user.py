"""
User model for dashboard authentication.

Users sign in with e-mail and password. Sellers (``vendedor``) are linked
to the sales they register.
"""

from sqlalchemy import Boolean, Column, String, CheckConstraint

from gspro.models.base import Base, UUIDMixin, TimestampMixin, ModelMixin


class User(Base, UUIDMixin, TimestampMixin, ModelMixin):
    """
    Dashboard user stored in ``usuarios``.

    Attributes:
        email: Unique login e-mail (stored lower-cased)
        name: Display name shown in sales and reports
        hashed_password: Bcrypt hash (never store plaintext)
        role: ``admin`` or ``vendedor``
        is_active: Inactive users cannot sign in
    """

    __tablename__ = "usuarios"

    email = Column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        doc="Unique login e-mail"
    )

    name = Column(String(255), nullable=False, doc="Display name")

    hashed_password = Column(
        String,
        nullable=False,
        doc="Bcrypt-hashed password (never store plaintext)"
    )

    role = Column(String(20), nullable=False, default="vendedor")

    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint("role IN ('admin', 'vendedor')", name="ck_usuarios_role"),
    )

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email!r}, role={self.role!r})"
