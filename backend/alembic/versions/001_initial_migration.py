"""Initial migration - create all tables

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# Enum columns store member names
ROLE_ENUM = sa.Enum('HR', 'DOCTOR', 'FRONT_DESK', name='roleenum')
ADMISSION_STATUS_ENUM = sa.Enum('ACTIVE', 'DISCHARGED', name='admissionstatusenum')


def upgrade() -> None:
    """Creates every system table."""

    op.create_table(
        'department',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )

    op.create_table(
        'employee',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('emp_id_display', sa.String(), nullable=True),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('role', ROLE_ENUM, nullable=False),
        sa.Column('department_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['department_id'], ['department.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_employee_emp_id_display', 'employee', ['emp_id_display'])
    op.create_index('ix_employee_role', 'employee', ['role'])

    op.create_table(
        'patient',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('patient_id_display', sa.String(), nullable=True),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('contact_no', sa.String(), nullable=True),
        sa.Column('address', sa.String(), nullable=True),
        sa.Column('dob', sa.Date(), nullable=True),
        sa.Column('gender', sa.String(), nullable=False),
        sa.Column('blood_type', sa.String(), nullable=True),
        sa.Column('emergency_contact_name', sa.String(), nullable=True),
        sa.Column('emergency_contact_number', sa.String(), nullable=True),
        sa.Column('date_registered', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_patient_patient_id_display', 'patient', ['patient_id_display'])

    op.create_table(
        'bed',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('bed_number', sa.String(), nullable=False),
        sa.Column('ward_type', sa.String(), nullable=False),
        sa.Column('is_occupied', sa.Boolean(), nullable=False),
        sa.Column('current_admission_id', sa.Integer(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_bed_bed_number', 'bed', ['bed_number'], unique=True)
    op.create_index('ix_bed_ward_type', 'bed', ['ward_type'])
    op.create_index('ix_bed_is_occupied', 'bed', ['is_occupied'])
    op.create_index('ix_bed_current_admission_id', 'bed', ['current_admission_id'])

    op.create_table(
        'admission',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('patient_id', sa.Integer(), nullable=False),
        sa.Column('doctor_id', sa.Integer(), nullable=True),
        sa.Column('bed_id', sa.Integer(), nullable=False),
        sa.Column('diagnosis', sa.String(), nullable=True),
        sa.Column('admit_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('discharge_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('status', ADMISSION_STATUS_ENUM, nullable=False),
        sa.ForeignKeyConstraint(['patient_id'], ['patient.id']),
        sa.ForeignKeyConstraint(['doctor_id'], ['employee.id']),
        sa.ForeignKeyConstraint(['bed_id'], ['bed.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_admission_patient_id', 'admission', ['patient_id'])
    op.create_index('ix_admission_bed_id', 'admission', ['bed_id'])
    op.create_index('ix_admission_admit_date', 'admission', ['admit_date'])
    op.create_index('ix_admission_status', 'admission', ['status'])

    op.create_table(
        'user_account',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('employee_id', sa.Integer(), nullable=True),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('access_role', ROLE_ENUM, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('last_login', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['employee_id'], ['employee.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_user_account_username', 'user_account', ['username'], unique=True)


def downgrade() -> None:
    """Drops every table in reverse dependency order."""
    op.drop_index('ix_user_account_username', table_name='user_account')
    op.drop_table('user_account')

    op.drop_index('ix_admission_status', table_name='admission')
    op.drop_index('ix_admission_admit_date', table_name='admission')
    op.drop_index('ix_admission_bed_id', table_name='admission')
    op.drop_index('ix_admission_patient_id', table_name='admission')
    op.drop_table('admission')

    op.drop_index('ix_bed_current_admission_id', table_name='bed')
    op.drop_index('ix_bed_is_occupied', table_name='bed')
    op.drop_index('ix_bed_ward_type', table_name='bed')
    op.drop_index('ix_bed_bed_number', table_name='bed')
    op.drop_table('bed')

    op.drop_index('ix_patient_patient_id_display', table_name='patient')
    op.drop_table('patient')

    op.drop_index('ix_employee_role', table_name='employee')
    op.drop_index('ix_employee_emp_id_display', table_name='employee')
    op.drop_table('employee')

    op.drop_table('department')

    ROLE_ENUM.drop(op.get_bind(), checkfirst=True)
    ADMISSION_STATUS_ENUM.drop(op.get_bind(), checkfirst=True)
