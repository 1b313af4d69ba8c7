from .exceptions import InvariantViolation

def assert_children_reference(children, parent_ids, *, fk="category_id", nullable=False):
    """
    Every child must point at a parent that belongs to the same website.
    ``parent_ids`` is the id set of that website's parent rows.
    """
    for child in children:
        ref = child.get(fk)
        if ref is None:
            if not nullable:
                raise InvariantViolation(f"{fk} is required but missing")
            continue

        if ref not in parent_ids:
            raise InvariantViolation(
                f"{fk}={ref} does not reference a row of the same website"
            )
