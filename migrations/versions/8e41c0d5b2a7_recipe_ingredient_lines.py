"""Raw ingredient lines per recipe

Revision ID: 8e41c0d5b2a7
Revises: 3b7d2f1a9c04
Create Date: 2026-10-18 14:03:17.296410

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '8e41c0d5b2a7'
down_revision = '3b7d2f1a9c04'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'recipe_ingredient_line',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('raw_name', sa.String(length=500), nullable=False),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipe.id'], ondelete='CASCADE',
                                name='fk_recipe_ingredient_line_recipe_id_recipe'),
        sa.PrimaryKeyConstraint('id', name='pk_recipe_ingredient_line'),
    )
    op.create_index('ix_recipe_ingredient_line_recipe_id', 'recipe_ingredient_line', ['recipe_id'])


def downgrade():
    op.drop_index('ix_recipe_ingredient_line_recipe_id', table_name='recipe_ingredient_line')
    op.drop_table('recipe_ingredient_line')
