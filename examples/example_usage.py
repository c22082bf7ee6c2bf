
import pandas as pd

from surrealql_literals import format_id_array, format_literal

products = pd.DataFrame(
    {
        "name": ["O'Reilly Handbook", "Plain Notebook"],
        "category_ids": [["category:books", "category:tech"], float("nan")],
    }
)

for row in products.itertuples(index=False):
    query = "UPDATE product SET categories = {ids} WHERE name = {name};".format(
        ids=format_id_array(row.category_ids),
        name=format_literal(row.name),
    )
    print(query)
