"""Ingredient vocabulary and recipe match detail tables

Revision ID: 3b7d2f1a9c04
Revises:
Create Date: 2026-10-18 09:12:41.508233

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7d2f1a9c04'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'ingredient_category',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_ingredient_category'),
        sa.UniqueConstraint('name', name='uq_ingredient_category_name'),
    )
    op.create_table(
        'ingredient',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['category_id'], ['ingredient_category.id'],
                                name='fk_ingredient_category_id_ingredient_category'),
        sa.PrimaryKeyConstraint('id', name='pk_ingredient'),
    )
    op.create_index('ix_ingredient_name', 'ingredient', ['name'])
    op.create_index('ix_ingredient_category_id', 'ingredient', ['category_id'])

    op.create_table(
        'ingredient_alias',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('alias', sa.String(length=100), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['ingredient_id'], ['ingredient.id'], ondelete='CASCADE',
                                name='fk_ingredient_alias_ingredient_id_ingredient'),
        sa.PrimaryKeyConstraint('id', name='pk_ingredient_alias'),
    )
    op.create_index('ix_ingredient_alias_alias', 'ingredient_alias', ['alias'])
    op.create_index('ix_ingredient_alias_ingredient_id', 'ingredient_alias', ['ingredient_id'])

    op.create_table(
        'two_word_ingredient',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('phrase', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_two_word_ingredient'),
    )
    op.create_index('ix_two_word_ingredient_phrase', 'two_word_ingredient', ['phrase'], unique=True)

    op.create_table(
        'recipe',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_recipe'),
    )
    op.create_index('ix_recipe_name', 'recipe', ['name'])

    op.create_table(
        'recipe_ingredient_detail',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=False),
        sa.Column('original_text', sa.String(length=500), nullable=False),
        sa.Column('matched_term', sa.String(length=200), nullable=True),
        sa.Column('match_type', sa.String(length=10), nullable=False),
        sa.Column('matched_alias', sa.String(length=200), nullable=True),
        sa.Column('amount', sa.String(length=50), nullable=True),
        sa.Column('unit', sa.String(length=50), nullable=True),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipe.id'], ondelete='CASCADE',
                                name='fk_recipe_ingredient_detail_recipe_id_recipe'),
        sa.ForeignKeyConstraint(['ingredient_id'], ['ingredient.id'], ondelete='CASCADE',
                                name='fk_recipe_ingredient_detail_ingredient_id_ingredient'),
        sa.PrimaryKeyConstraint('id', name='pk_recipe_ingredient_detail'),
    )
    op.create_index('ix_recipe_ingredient_detail_recipe_id', 'recipe_ingredient_detail', ['recipe_id'])
    op.create_index('ix_recipe_ingredient_detail_ingredient_id', 'recipe_ingredient_detail', ['ingredient_id'])


def downgrade():
    op.drop_table('recipe_ingredient_detail')
    op.drop_table('recipe')
    op.drop_table('two_word_ingredient')
    op.drop_table('ingredient_alias')
    op.drop_table('ingredient')
    op.drop_table('ingredient_category')
