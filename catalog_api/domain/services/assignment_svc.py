# catalog_api/domain/services/assignment_svc.py
import logging
import time
from numbers import Real

from catalog_api.clients.account_directory import AccountDirectoryClient
from catalog_api.domain.errors import (
    AccountNotFoundError,
    DependencyError,
    ProductNotFoundError,
)
from catalog_api.domain.models.assignment import AssignmentOutcome, ChargeError
from catalog_api.domain.repositories.assignment_repo import AssignmentRepo
from catalog_api.domain.repositories.product_repo import ProductRepo
from catalog_api.domain.services.constants import CHARGE_APPLIED, CHARGE_FAILED, CHARGE_SKIPPED

logger = logging.getLogger(__name__)


async def assign_product_to_account(
    products: ProductRepo,
    assignments: AssignmentRepo,
    directory: AccountDirectoryClient,
    *,
    product_id: str,
    account_id: str,
    charge_on_assign: bool = False,
) -> AssignmentOutcome:
    """
    Assign a catalog product to an external account.

    Ordered steps:
      1) resolve the product locally          -> ProductNotFoundError, nothing recorded
      2) verify the account in the directory  -> AccountNotFoundError / DependencyError, nothing recorded
      3) append the assignment to the ledger  (in-process, no await, cannot fail)
      4) if charge_on_assign and the product has a numeric price, debit the account by the price

    A failed charge does NOT undo step 3: the outcome carries the recorded assignment
    plus a charge_error. There is no compensation and no retry.
    """
    t0 = time.perf_counter()

    # 1) Resolve product
    product = products.get_by_id(product_id)
    if product is None:
        logger.info("assign product not found product_id=%s account_id=%s", product_id, account_id)
        raise ProductNotFoundError(product_id)

    # 2) Verify account (suspends on network I/O)
    try:
        await directory.get_account(account_id)
    except AccountNotFoundError:
        logger.info("assign account not found product_id=%s account_id=%s", product_id, account_id)
        raise
    except DependencyError as e:
        logger.warning(
            "assign account check failed product_id=%s account_id=%s upstream_status=%s err=%s",
            product_id, account_id, e.upstream_status, e.message,
        )
        raise

    # 3) Record assignment; from here on the assignment stands whatever happens next
    assignment = assignments.append(account_id, product.id)
    logger.info("assign recorded id=%s product_id=%s account_id=%s", assignment.id, product.id, account_id)

    # 4) Conditional charge
    has_price = isinstance(product.price, Real) and not isinstance(product.price, bool)
    if not (charge_on_assign and has_price):
        logger.debug("assign charge skipped id=%s charge_on_assign=%s", assignment.id, charge_on_assign)
        return AssignmentOutcome(assignment=assignment, charge_status=CHARGE_SKIPPED)

    try:
        charge = await directory.apply_credit(account_id, -product.price)
    except (DependencyError, AccountNotFoundError) as e:
        upstream_status = e.upstream_status if isinstance(e, DependencyError) else e.status_code
        logger.warning(
            "assign charge failed id=%s account_id=%s amount=%s upstream_status=%s err=%s (assignment kept)",
            assignment.id, account_id, -product.price, upstream_status, e.message,
        )
        return AssignmentOutcome(
            assignment=assignment,
            charge_status=CHARGE_FAILED,
            charge_error=ChargeError(status=upstream_status, error=e.message),
        )

    logger.info(
        "assign charge applied id=%s account_id=%s amount=%s total_time=%.3fs",
        assignment.id, account_id, -product.price, time.perf_counter() - t0,
    )
    return AssignmentOutcome(assignment=assignment, charge_status=CHARGE_APPLIED, charge=charge)
