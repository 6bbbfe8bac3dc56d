"""Database models for the lending context."""

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from solicitudes.database import Base


class LoanType(Base):
    """Loan product with its permitted amount range and annual rate."""

    __tablename__ = "tipos_prestamo"

    id: Mapped[uuid.UUID] = mapped_column("id_tipo_prestamo", Uuid, primary_key=True)
    name: Mapped[str] = mapped_column("nombre", String(100), unique=True, nullable=False)
    min_amount: Mapped[Decimal] = mapped_column("monto_minimo", Numeric(15, 2), nullable=False)
    max_amount: Mapped[Decimal] = mapped_column("monto_maximo", Numeric(15, 2), nullable=False)
    interest_rate: Mapped[Decimal] = mapped_column(
        "tasa_interes_anual", Numeric(5, 2), nullable=False
    )
    requires_auto_validation: Mapped[bool] = mapped_column(
        "validacion_automatica", Boolean, nullable=False, default=False
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    active: Mapped[bool] = mapped_column("activo", Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        "fecha_creacion", DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        "fecha_actualizacion",
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # UPDATE ... WHERE version = :loaded_version; a lost race raises StaleDataError
    __mapper_args__ = {"version_id_col": version}  # noqa: RUF012

    def __repr__(self) -> str:
        return f"<LoanType(id={self.id}, name='{self.name}', version={self.version})>"


class Status(Base):
    """Workflow status an application can be in."""

    __tablename__ = "estados"

    id: Mapped[uuid.UUID] = mapped_column("id_estado", Uuid, primary_key=True)
    name: Mapped[str] = mapped_column("nombre", String(100), unique=True, nullable=False)
    description: Mapped[str] = mapped_column("descripcion", Text, nullable=False, default="")
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    active: Mapped[bool] = mapped_column("activo", Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        "fecha_creacion", DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        "fecha_actualizacion",
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    __mapper_args__ = {"version_id_col": version}  # noqa: RUF012

    def __repr__(self) -> str:
        return f"<Status(id={self.id}, name='{self.name}', version={self.version})>"


class LoanApplication(Base):
    """Loan application (solicitud)."""

    __tablename__ = "solicitudes"

    id: Mapped[uuid.UUID] = mapped_column("id_solicitud", Uuid, primary_key=True)
    amount: Mapped[Decimal] = mapped_column("monto_solicitado", Numeric(15, 2), nullable=False)
    term_months: Mapped[int] = mapped_column("plazo_meses", Integer, nullable=False)
    applicant_email: Mapped[str] = mapped_column(
        "email_solicitante", String(254), nullable=False, index=True
    )
    status_id: Mapped[uuid.UUID] = mapped_column(
        "id_estado", Uuid, ForeignKey("estados.id_estado"), nullable=False, index=True
    )
    loan_type_id: Mapped[uuid.UUID] = mapped_column(
        "id_tipo_prestamo",
        Uuid,
        ForeignKey("tipos_prestamo.id_tipo_prestamo"),
        nullable=False,
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    active: Mapped[bool] = mapped_column("activo", Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        "fecha_creacion", DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        "fecha_actualizacion",
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    __mapper_args__ = {"version_id_col": version}  # noqa: RUF012

    def __repr__(self) -> str:
        return f"<LoanApplication(id={self.id}, amount={self.amount}, version={self.version})>"
