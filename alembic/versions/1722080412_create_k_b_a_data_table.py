"""create k_b_a_data table

Revision ID: 1722080412
Revises:
Create Date: 2024-07-27 11:40:12

"""

from alembic import context, op

from kba_plugin.migrations import Migration1722080412CreateKBADataTable


# revision identifiers, used by Alembic.
revision = "1722080412"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    step = Migration1722080412CreateKBADataTable()
    if context.is_offline_mode():
        op.execute(step.statement())
    else:
        step.update(op.get_bind())


def downgrade() -> None:
    if context.is_offline_mode():
        return
    Migration1722080412CreateKBADataTable().update_destructive(op.get_bind())
