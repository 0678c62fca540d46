from alembic import op
import sqlalchemy as sa

revision = '0001_init'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'products',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('quantity', sa.Integer, nullable=False, server_default='0'),
        sa.Column('category', sa.String(100), nullable=True),
        sa.Column('in_stock', sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column('expiry_date', sa.Date, nullable=True),
        sa.Column('min_stock_level', sa.Integer, nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime, nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime, nullable=False, server_default=sa.func.now()),
    )

def downgrade():
    op.drop_table('products')
