from sys import stderr
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .table import Bucket, HashTable


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=stderr)


def dump_table(table: "HashTable", name: str):
    printf("== {0:s} ==\n", name)
    printf(
        "size={0:d} capacity={1:d} load_factor={2:.2f}\n",
        table.size(),
        table.capacity(),
        table.load_factor,
    )

    for index, bucket in enumerate(table.buckets):
        dump_bucket(bucket, index)


def dump_bucket(bucket: "Bucket", index: int):
    printf("{0:04d} ", index)
    if not bucket:
        printf("-\n")
        return

    pairs = " ".join("{0:d}={1!r}".format(e.key, e.value) for e in bucket)
    printf("{0:s}\n", pairs)
