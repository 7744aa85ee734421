import pytest

from rowframe import MISSING, Constant, DataFrame, Generator, SchemaError, Series, config


@pytest.fixture
def df():
    return DataFrame(
        [
            {"name": "Alice", "age": 30, "active": True},
            {"name": "Bob", "age": 25, "active": False},
        ]
    )


@pytest.fixture
def users():
    return DataFrame([{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}])


@pytest.fixture
def ages():
    return DataFrame([{"userId": 1, "age": 25}, {"userId": 3, "age": 30}])


def test_init_copies_row_list():
    rows = [{"a": 1}]
    df = DataFrame(rows)
    rows.append({"a": 2})
    assert len(df) == 1


@pytest.mark.parametrize("invalid", [42, "abc", {"a": 1}, [1, 2]])
def test_init_invalid(invalid):
    with pytest.raises(ValueError):
        DataFrame(invalid)


def test_empty():
    empty = DataFrame([])
    assert empty.is_empty
    assert empty.shape == (0, 0)
    assert empty.columns == []
    assert DataFrame().is_empty


def test_column_to_series_and_back(df):
    series = df.col("age")
    as_array = series.to_array()
    assert isinstance(as_array[0], int)
    new_df = DataFrame([{series.name: as_array}])
    assert len(new_df.head(1)) == 1


def test_col(df):
    col = df.col("name")
    assert isinstance(col, Series)
    assert col.name == "name"
    assert col.to_array() == ["Alice", "Bob"]


def test_col_missing_in_some_rows():
    df = DataFrame([{"a": 1}, {"b": 2}])
    assert df.col("a").to_array() == [1, MISSING]


def test_select(df):
    selected = df.select("name", "active")
    assert selected.shape == (2, 2)
    assert selected.to_array() == [
        {"name": "Alice", "active": True},
        {"name": "Bob", "active": False},
    ]
    assert selected.columns == ["name", "active"]


def test_drop(df):
    dropped = df.drop("active")
    assert dropped.shape == (2, 2)
    assert dropped.to_array() == [{"name": "Alice", "age": 30}, {"name": "Bob", "age": 25}]
    assert df.shape == (2, 3)


def test_drop_uses_first_row_columns():
    df = DataFrame([{"a": 1, "b": 2}, {"a": 3, "c": 4}])
    assert df.drop("b").to_array() == [{"a": 1}, {"a": 3}]
    assert df.drop("a").to_array() == [{"b": 2}, {"b": MISSING}]


def test_assign(df):
    assigned = df.assign(
        {
            "birth_year": lambda r: 2025 - r["age"],
            "name_length": lambda r: len(r["name"]),
        }
    )
    assert assigned.shape == (2, 5)
    assert assigned.to_array() == [
        {"name": "Alice", "age": 30, "active": True, "birth_year": 1995, "name_length": 5},
        {"name": "Bob", "age": 25, "active": False, "birth_year": 2000, "name_length": 3},
    ]


def test_assign_sees_only_original_row(df):
    assigned = df.assign(age=lambda r: r["age"] + 1, next_age=lambda r: r["age"] + 1)
    assert assigned.col("age").to_array() == [31, 26]
    assert assigned.col("next_age").to_array() == [31, 26]
    assert df.col("age").to_array() == [30, 25]


def test_map_rows(df):
    mapped = df.map_rows(lambda row: {"initials": row["name"][0]})
    assert mapped.to_array() == [{"initials": "A"}, {"initials": "B"}]


def test_map_rows_with_index(df):
    mapped = df.map_rows(lambda row, i: {"position": i, "name": row["name"]})
    assert mapped.to_array() == [
        {"position": 0, "name": "Alice"},
        {"position": 1, "name": "Bob"},
    ]


def test_map_columns(df):
    mapped = df.map_columns(
        {
            "name": lambda s: s.to_lower(),
            "age": lambda s: s.lambda_(lambda v: v * 2),
        }
    )
    assert mapped.to_array() == [{"name": "alice", "age": 60}, {"name": "bob", "age": 50}]


def test_map_columns_accepts_sequences(df):
    mapped = df.map_columns({"age": lambda s: [v + 1 for v in s.items]})
    assert mapped.to_array() == [{"age": 31}, {"age": 26}]


def test_map_columns_different_lengths(df):
    with pytest.raises(ValueError):
        df.map_columns({"name": lambda s: s, "age": lambda s: s.concat([1])})


def test_filter_rows(df):
    filtered = df.filter_rows(lambda row: row["active"])
    assert filtered.to_array() == [{"name": "Alice", "age": 30, "active": True}]


def test_filter_rows_with_index(df):
    filtered = df.filter_rows(lambda row, i: i > 0)
    assert filtered.col("name").to_array() == ["Bob"]


def test_push_row(df):
    assert df.push_row({"name": "Charlie", "age": 40, "active": True}) is None
    assert df.shape == (3, 3)
    assert df.to_array()[2] == {"name": "Charlie", "age": 40, "active": True}


def test_push_row_on_empty_frame_defines_columns():
    df = DataFrame()
    df.push_row({"a": 1, "b": 2})
    assert df.columns == ["a", "b"]


def test_add_column_constant(df):
    result = df.add_column("country", "IT")
    assert result.col("country").to_array() == ["IT", "IT"]
    assert result.shape == (2, 4)
    assert df.shape == (2, 3)


def test_add_column_default_is_none(df):
    assert df.add_column("empty").col("empty").to_array() == [None, None]


def test_add_column_function(df):
    result = df.add_column("initials", lambda row: row["name"][0])
    assert result.head(2) == [
        {"name": "Alice", "age": 30, "active": True, "initials": "A"},
        {"name": "Bob", "age": 25, "active": False, "initials": "B"},
    ]


def test_add_column_function_with_index(df):
    result = df.add_column("position", lambda row, i: i)
    assert result.col("position").to_array() == [0, 1]


def test_add_column_explicit_variants(df):
    assert df.add_column("f", Constant(len)).col("f").to_array() == [len, len]
    generated = df.add_column("n", Generator(lambda row: row["age"] // 10))
    assert generated.col("n").to_array() == [3, 2]


def test_add_column_overrides_existing(df):
    assert df.add_column("age", 0).col("age").to_array() == [0, 0]


def test_to_array_is_a_shallow_copy(df):
    arr = df.to_array()
    assert arr == [
        {"name": "Alice", "age": 30, "active": True},
        {"name": "Bob", "age": 25, "active": False},
    ]
    assert arr is not df.rows
    assert arr[0] is df.rows[0]


def test_rows_are_shared_with_derived_frames(df):
    derived = df.filter_rows(lambda row: True)
    derived.rows[0]["age"] = 99
    assert df.col("age").to_array() == [99, 25]


def test_copy_isolates_rows(df):
    copied = df.copy()
    copied.rows[0]["age"] = 99
    assert df.col("age").to_array() == [30, 25]
    assert copied.to_array()[0]["age"] == 99


def test_head(df):
    df.push_row({"name": "Charlie", "age": 40, "active": False})
    assert df.head(2) == [
        {"name": "Alice", "age": 30, "active": True},
        {"name": "Bob", "age": 25, "active": False},
    ]
    assert len(df.head()) == 3


def test_tail(df):
    df.push_row({"name": "John", "age": 35, "active": True})
    assert df.tail(1) == [{"name": "John", "age": 35, "active": True}]
    assert len(df.tail()) == 3
    assert df.tail(0) == []


def test_shape(df):
    assert df.shape == (2, 3)
    assert DataFrame([]).shape == (0, 0)


def test_shape_and_columns_use_first_row():
    df = DataFrame([{"a": 1}, {"a": 2, "b": 3, "c": 4}])
    assert df.shape == (2, 1)
    assert df.columns == ["a"]


def test_columns(df):
    assert df.columns == ["name", "age", "active"]


def test_check_schema(df):
    df.check_schema()
    DataFrame().check_schema()


@pytest.mark.parametrize(
    "rows",
    [
        [{"a": 1, "b": 2}, {"a": 1}],
        [{"a": 1}, {"a": 1, "b": 2}],
        [{"a": 1, "b": 2}, {"b": 2, "a": 1}],
    ],
)
def test_check_schema_divergent_rows(rows):
    with pytest.raises(SchemaError, match="Row 1"):
        DataFrame(rows).check_schema()


def test_left_join(users, ages):
    joined = users.left_join(ages, this_key="id", other_key="userId")
    assert joined.to_array() == [
        {"id": 1, "name": "Alice", "age": 25},
        {"id": 2, "name": "Bob", "age": None},
    ]
    assert len(joined) == len(users)


def test_right_join(users, ages):
    joined = users.right_join(ages, this_key="id", other_key="userId")
    assert joined.to_array() == [
        {"name": "Alice", "age": 25, "userId": 1},
        {"name": None, "age": 30, "userId": 3},
    ]
    assert len(joined) == len(ages)
    assert joined.columns == ["userId", "age", "name"]


def test_join_same_key_name():
    left = DataFrame([{"id": 1, "a": "x"}, {"id": 2, "a": "y"}])
    right = DataFrame([{"id": 2, "b": True}])
    assert left.left_join(right, "id").to_array() == [
        {"id": 1, "a": "x", "b": None},
        {"id": 2, "a": "y", "b": True},
    ]


def test_join_with_empty_frames(users):
    empty = DataFrame()
    assert users.left_join(empty, "id").to_array() == users.to_array()
    assert users.right_join(empty, "id").to_array() == []
    assert empty.left_join(users, "id").is_empty


def test_join_first_match_only(users):
    duplicated = DataFrame([{"id": 1, "age": 25}, {"id": 1, "age": 99}])
    joined = users.left_join(duplicated, "id")
    assert joined.col("age").to_array() == [25, None]


def test_str(df):
    assert str(df) == (
        "name  | age | active\n"
        "----- | --- | ------\n"
        "Alice | 30  | true  \n"
        "Bob   | 25  | false "
    )


def test_str_max_rows():
    df = DataFrame([{"n": i} for i in range(5)])
    with config.option_context(display_max_rows=3):
        assert str(df).splitlines()[-1] == "... and 2 more rows"


def test_repr(df):
    assert repr(df).startswith("DataFrame(shape=(2, 3))\n")
