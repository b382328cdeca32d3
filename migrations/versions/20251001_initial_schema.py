"""
Initial hotel schema.

Creates staff, rooms and stays, dining, tasks, attendance, activity log and
notification tables.
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = 'initial_20251001'
down_revision = None
branch_labels = None
depends_on = None


def _uuid():
    return postgresql.UUID(as_uuid=True)


def _ts():
    return sa.DateTime(timezone=True)


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('username', sa.String(100), nullable=False, unique=True),
        sa.Column('name', sa.String(200), nullable=True),
        sa.Column('email', sa.String(320), nullable=False, unique=True),
        sa.Column('password_hash', sa.Text(), nullable=False),
        sa.Column('role', sa.String(30), nullable=False),
        sa.Column('employee_number', sa.Integer(), nullable=True, unique=True),
        sa.Column('job_title', sa.String(30), nullable=False),
        sa.Column('contact_number', sa.String(50), nullable=False),
        sa.Column('card_id', sa.String(100), nullable=True, unique=True),
        sa.Column('created_at', _ts(), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'])

    op.create_table(
        'employees',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('employee_number', sa.Integer(), nullable=False, unique=True),
        sa.Column('employee_code', sa.String(50), nullable=True),
        sa.Column('username', sa.String(100), nullable=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('email', sa.String(320), nullable=True),
        sa.Column('password_hash', sa.Text(), nullable=True),
        sa.Column('role', sa.String(30), nullable=False),
        sa.Column('department', sa.String(100), nullable=False),
        sa.Column('job_title', sa.String(30), nullable=True),
        sa.Column('contact_number', sa.String(50), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('date_hired', _ts(), nullable=True),
        sa.Column('shift', sa.String(50), nullable=True),
        sa.Column('notes', sa.Text(), nullable=False),
        sa.Column('card_id', sa.String(100), nullable=True, unique=True),
        sa.Column('created_at', _ts(), nullable=False),
    )
    op.create_index('ix_employees_employee_number', 'employees', ['employee_number'])
    op.create_index('ix_employees_employee_code', 'employees', ['employee_code'])
    op.create_index('ix_employees_username', 'employees', ['username'])
    op.create_index('ix_employees_email', 'employees', ['email'])

    op.create_table(
        'rooms',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('room_number', sa.String(50), nullable=False, unique=True),
        sa.Column('room_type', sa.String(30), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('amenities', postgresql.JSONB(), nullable=False),
        sa.Column('status', sa.String(30), nullable=False),
        sa.Column('guest_name', sa.String(200), nullable=False),
        sa.Column('guest_contact', sa.String(100), nullable=False),
        sa.Column('created_at', _ts(), nullable=False),
    )
    op.create_index('ix_rooms_room_number', 'rooms', ['room_number'])

    op.create_table(
        'customers',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('contact_number', sa.String(100), nullable=False),
        sa.Column('room_number', sa.String(50), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('checkin_date', _ts(), nullable=False),
        sa.Column('checkin_time', sa.String(20), nullable=True),
        sa.Column('checkout_date', sa.String(50), nullable=True),
        sa.Column('updated_checkout_date', sa.String(50), nullable=True),
    )
    op.create_index('ix_customers_room_number_checkin_date', 'customers', ['room_number', 'checkin_date'])

    op.create_table(
        'bookings',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('room_id', _uuid(), sa.ForeignKey('rooms.id', ondelete='SET NULL'), nullable=True),
        sa.Column('customer_name', sa.String(200), nullable=True),
        sa.Column('customer_email', sa.String(320), nullable=True),
        sa.Column('check_in_date', _ts(), nullable=True),
        sa.Column('check_out_date', _ts(), nullable=True),
        sa.Column('special_id', sa.String(100), nullable=True),
        sa.Column('partial_payment', sa.Float(), nullable=True),
        sa.Column('payment_status', sa.String(50), nullable=True),
        sa.Column('payment_details', postgresql.JSONB(), nullable=True),
        sa.Column('booking_status', sa.String(50), nullable=True),
        sa.Column('total_amount', sa.Float(), nullable=True),
        sa.Column('booked_at', _ts(), nullable=True),
    )

    op.create_table(
        'reservations',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('room', sa.String(50), nullable=False),
        sa.Column('date', sa.String(20), nullable=False),
        sa.Column('time', sa.String(20), nullable=False),
        sa.Column('amenity', sa.String(100), nullable=False),
        sa.Column('created_at', _ts(), nullable=False),
    )

    op.create_table(
        'contact_messages',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('room_number', sa.String(50), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('created_at', _ts(), nullable=False),
    )

    op.create_table(
        'foods',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('category', sa.String(50), nullable=False),
        sa.Column('img', sa.Text(), nullable=False),
        sa.Column('details', sa.Text(), nullable=True),
    )
    op.create_index('ix_foods_category', 'foods', ['category'])

    op.create_table(
        'carousel_combos',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('img', sa.Text(), nullable=False),
        sa.Column('items', postgresql.JSONB(), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
        sa.Column('created_at', _ts(), nullable=False),
        sa.Column('updated_at', _ts(), nullable=False),
    )

    op.create_table(
        'carts',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('room_number', sa.String(50), nullable=False, unique=True),
        sa.Column('items', postgresql.JSONB(), nullable=False),
        sa.Column('updated_at', _ts(), nullable=False),
    )
    op.create_index('ix_carts_room_number', 'carts', ['room_number'])

    op.create_table(
        'orders',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('room_number', sa.String(50), nullable=False),
        sa.Column('items', postgresql.JSONB(), nullable=False),
        sa.Column('checked_out_at', _ts(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('delivered_at', _ts(), nullable=True),
    )
    op.create_index('ix_orders_room_number_checked_out_at', 'orders', ['room_number', 'checked_out_at'])
    op.create_index('ix_orders_status', 'orders', ['status'])

    op.create_table(
        'billings',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('order_id', _uuid(), sa.ForeignKey('orders.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('room_number', sa.String(50), nullable=False),
        sa.Column('items', postgresql.JSONB(), nullable=False),
        sa.Column('checked_out_at', _ts(), nullable=True),
        sa.Column('delivered_at', _ts(), nullable=False),
        sa.Column('total_price', sa.Float(), nullable=False),
    )
    op.create_index('ix_billings_room_number', 'billings', ['room_number'])

    op.create_table(
        'tasks',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('task_code', sa.String(20), nullable=False, unique=True),
        sa.Column('assigned_to', _uuid(), sa.ForeignKey('employees.id', ondelete='SET NULL'), nullable=True),
        sa.Column('employee_code', sa.String(50), nullable=False),
        sa.Column('room', sa.String(50), nullable=False),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('priority', sa.String(10), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('job_title', sa.String(30), nullable=False),
        sa.Column('estimated_duration', sa.Integer(), nullable=False),
        sa.Column('due_date', _ts(), nullable=False),
        sa.Column('created_by', sa.String(100), nullable=False),
        sa.Column('notes', postgresql.JSONB(), nullable=False),
        sa.Column('prior_status', sa.String(30), nullable=True),
        sa.Column('created_at', _ts(), nullable=False),
        sa.Column('updated_at', _ts(), nullable=False),
    )
    op.create_index('ix_tasks_task_code', 'tasks', ['task_code'])
    op.create_index('ix_tasks_type_status', 'tasks', ['type', 'status'])

    op.create_table(
        'task_requests',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('task_code', sa.String(20), nullable=False, unique=True),
        sa.Column('room_number', sa.String(50), nullable=False),
        sa.Column('job_type', sa.String(30), nullable=False),
        sa.Column('date', _ts(), nullable=False),
        sa.Column('priority', sa.String(10), nullable=False),
    )

    op.create_table(
        'attendances',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('employee_id', _uuid(), sa.ForeignKey('employees.id', ondelete='CASCADE'), nullable=False),
        sa.Column('card_id', sa.String(100), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('clock_in', _ts(), nullable=False),
        sa.Column('clock_out', _ts(), nullable=True),
        sa.Column('total_hours', sa.Float(), nullable=True),
        sa.Column('date', sa.String(10), nullable=False),
    )
    op.create_index('ix_attendances_employee_id_clock_out', 'attendances', ['employee_id', 'clock_out'])

    op.create_table(
        'activity_logs',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('action_type', sa.String(30), nullable=False),
        sa.Column('collection', sa.String(50), nullable=False),
        sa.Column('document_id', _uuid(), nullable=False),
        sa.Column('user', sa.String(200), nullable=True),
        sa.Column('timestamp', _ts(), nullable=False),
        sa.Column('details', postgresql.JSONB(), nullable=True),
        sa.Column('change', postgresql.JSONB(), nullable=True),
    )
    op.create_index('ix_activity_logs_collection_document_id', 'activity_logs', ['collection', 'document_id'])
    op.create_index('ix_activity_logs_timestamp', 'activity_logs', ['timestamp'])

    op.create_table(
        'notifications',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('recipient_id', _uuid(), nullable=False),
        sa.Column('recipient_model', sa.String(20), nullable=False),
        sa.Column('type', sa.String(30), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('related_id', _uuid(), nullable=False),
        sa.Column('related_model', sa.String(20), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False),
        sa.Column('priority', sa.String(10), nullable=False),
        sa.Column('action', sa.String(20), nullable=True),
        sa.Column('task_code', sa.String(20), nullable=True),
        sa.Column('room', sa.String(50), nullable=True),
        sa.Column('task_type', sa.String(30), nullable=True),
        sa.Column('status', sa.String(30), nullable=True),
        sa.Column('created_at', _ts(), nullable=False),
        sa.Column('updated_at', _ts(), nullable=False),
    )
    op.create_index('idx_notifications_recipient_is_read_created_at', 'notifications', ['recipient_id', 'is_read', 'created_at'])
    op.create_index('idx_notifications_related', 'notifications', ['related_id', 'related_model'])

    op.create_table(
        'hotel_admin_notifications',
        sa.Column('id', _uuid(), primary_key=True),
        sa.Column('booking_id', sa.String(100), nullable=True),
        sa.Column('task_code', sa.String(20), nullable=True),
        sa.Column('room_number', sa.String(50), nullable=True),
        sa.Column('room_type', sa.String(30), nullable=True),
        sa.Column('employee_code', sa.String(50), nullable=True),
        sa.Column('task_type', sa.String(30), nullable=True),
        sa.Column('old_status', sa.String(30), nullable=True),
        sa.Column('new_status', sa.String(30), nullable=True),
        sa.Column('is_room_notification', sa.Boolean(), nullable=False),
        sa.Column('is_task_notification', sa.Boolean(), nullable=False),
        sa.Column('raw', postgresql.JSONB(), nullable=True),
        sa.Column('timestamp', _ts(), nullable=False),
        sa.Column('read', sa.Boolean(), nullable=False),
    )
    op.create_index('ix_hotel_admin_notifications_booking_id', 'hotel_admin_notifications', ['booking_id'])
    op.create_index('ix_hotel_admin_notifications_task_code', 'hotel_admin_notifications', ['task_code'])
    op.create_index('idx_hotel_admin_notifications_timestamp', 'hotel_admin_notifications', ['timestamp'])


def downgrade() -> None:
    for table in (
        'hotel_admin_notifications',
        'notifications',
        'activity_logs',
        'attendances',
        'task_requests',
        'tasks',
        'billings',
        'orders',
        'carts',
        'carousel_combos',
        'foods',
        'contact_messages',
        'reservations',
        'bookings',
        'customers',
        'rooms',
        'employees',
        'users',
    ):
        op.drop_table(table)
