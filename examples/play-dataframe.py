from rowframe import DataFrame, config

config.enable_debug()

users = DataFrame([
    {"id": 1, "name": "Alice", "city": "Rome"},
    {"id": 2, "name": "Bob", "city": "Milan"},
    {"id": 3, "name": "Charlie", "city": "Rome"},
])
orders = DataFrame([
    {"userId": 1, "total": 30.5},
    {"userId": 3, "total": 12.0},
    {"userId": 4, "total": 99.9},
])

df = users \
  .left_join(orders, this_key="id", other_key="userId") \
  .filter_rows(lambda row: row["city"] == "Rome") \
  .add_column("vip", lambda row: (row["total"] or 0) > 20)

print(df)
print(df.col("total").mean())
print(users.right_join(orders, this_key="id", other_key="userId"))
