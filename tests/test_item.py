import pytest

from database_tree.item import DatabaseTreeItem, DatabaseTreeItemKind, TreeItemInfo
from database_tree.models import Database, Schema, Table


@pytest.fixture
def database():
    return Database("shop", [Table("orders")])


def test_unindent_stops_at_zero():
    info = TreeItemInfo(1, True)
    info.unindent()
    assert info.indent == 0
    info.unindent()
    assert info.indent == 0


def test_new_database_is_visible_and_collapsed(database):
    item = DatabaseTreeItem.new_database(database, False)
    assert item.info.indent == 0
    assert item.info.visible is True
    assert item.kind.is_database()
    assert item.kind.is_database_collapsed()
    assert item.kind.name() == "shop"
    assert item.kind.database_name() is None


def test_new_table_indent_depends_on_schema(database):
    plain = DatabaseTreeItem.new_table(database, Table("orders"))
    scoped = DatabaseTreeItem.new_table(database, Table("orders", schema="sales"))
    assert plain.info.indent == 1
    assert scoped.info.indent == 2
    assert plain.info.visible is False
    assert plain.kind.is_table()
    assert plain.kind.schema_name() is None
    assert scoped.kind.schema_name() == "sales"
    assert scoped.kind.database_name() == "shop"


def test_new_schema_starts_collapsed_and_hidden(database):
    item = DatabaseTreeItem.new_schema(database, Schema("sales"), False)
    assert item.info.indent == 1
    assert item.info.visible is False
    assert item.kind.is_schema()
    assert item.kind.is_schema_collapsed()
    assert not item.kind.is_database_collapsed()
    assert item.kind.schema_name() is None
    assert item.kind.name() == "sales"


def test_kind_rejects_table_and_schema_together(database):
    with pytest.raises(ValueError):
        DatabaseTreeItemKind(database, table=Table("t"), schema=Schema("s"))


def test_expand_and_collapse_database(database):
    item = DatabaseTreeItem.new_database(database, True)
    item.expand_database()
    assert not item.kind.is_database_collapsed()
    item.collapse_database()
    assert item.kind.is_database_collapsed()


def test_schema_operations_do_not_touch_database(database):
    item = DatabaseTreeItem.new_database(database, True)
    item.expand_schema()
    assert item.kind.is_database_collapsed()
    schema = DatabaseTreeItem.new_schema(database, Schema("sales"), True)
    schema.expand_database()
    assert schema.kind.is_schema_collapsed()
    schema.expand_schema()
    assert not schema.kind.is_schema_collapsed()
    schema.collapse_schema()
    assert schema.kind.is_schema_collapsed()


def test_set_collapsed_only_affects_databases(database):
    db_item = DatabaseTreeItem.new_database(database, True)
    db_item.set_collapsed(False)
    assert not db_item.kind.is_database_collapsed()
    schema = DatabaseTreeItem.new_schema(database, Schema("sales"), True)
    schema.set_collapsed(False)
    assert schema.kind.is_schema_collapsed()


def test_show_and_hide(database):
    item = DatabaseTreeItem.new_table(database, Table("orders"))
    item.show()
    assert item.info.visible is True
    item.hide()
    assert item.info.visible is False


def test_is_match_checks_substring_of_name(database):
    item = DatabaseTreeItem.new_table(database, Table("orders"))
    assert item.is_match("ord")
    assert item.is_match("")
    assert not item.is_match("shop")
    assert DatabaseTreeItem.new_database(database, True).is_match("sho")


def test_equality_distinguishes_databases_from_other_rows():
    db = Database("x")
    other = Database("y")
    database_row = DatabaseTreeItem.new_database(db, True)
    table_row = DatabaseTreeItem.new_table(db, Table("x"))
    assert not database_row == table_row
    assert DatabaseTreeItem.new_table(db, Table("t")) == DatabaseTreeItem.new_table(
        other, Table("t")
    )
    assert DatabaseTreeItem.new_schema(db, Schema("t"), True) == DatabaseTreeItem.new_table(
        db, Table("t")
    )


def test_rows_sort_by_name(database):
    rows = [DatabaseTreeItem.new_table(database, Table(name)) for name in ("c", "a", "b")]
    assert [row.kind.name() for row in sorted(rows)] == ["a", "b", "c"]
    assert rows[1] < rows[2]