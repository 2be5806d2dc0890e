from sqlalchemy.orm import declarative_base

Base = declarative_base()

# upper bound of the Integer primary keys
MAX_ID = 2**31 - 1


def id_in_range(value: int) -> bool:
    return isinstance(value, int) and 1 <= value <= MAX_ID
