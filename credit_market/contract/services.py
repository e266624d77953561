from credit_market.contract.models import CONTRACT_KEY, Contract
from credit_market.core.database.store import EntityStore
from credit_market.core.exceptions import ContractNotInitialized, Unauthorized
from credit_market.core.security import get_password_hash, verify_password
from credit_market.logging_config import logger
from credit_market.utils import check_amount


def initialize_contract(
    store: EntityStore, password: str, credit_per_energy: int
) -> Contract:
    """Write the contract singleton, replacing any previous configuration."""
    check_amount("Credit per energy", credit_per_energy)

    contract = Contract(
        id=CONTRACT_KEY,
        hashed_password=get_password_hash(password),
        credit_per_energy=credit_per_energy,
    )

    with store.atomic():
        previous = store.insert(contract)

    if previous is None:
        logger.info(f"Contract initialised with {credit_per_energy} credits per energy")
    else:
        logger.info(
            f"Contract re-initialised: credits per energy "
            f"{previous.credit_per_energy} -> {credit_per_energy}"
        )

    return contract


def read_contract(store: EntityStore) -> Contract | None:
    with store.atomic():
        return store.get(Contract, CONTRACT_KEY)


def require_contract(store: EntityStore) -> Contract:
    contract = read_contract(store)
    if contract is None:
        raise ContractNotInitialized()
    return contract


def verify_contract_password(store: EntityStore, password: str) -> Contract:
    """Return the contract if ``password`` is the administrator password.

    Raises:
        ContractNotInitialized: If the contract has not been written yet.
        Unauthorized: If the password does not match.
    """
    contract = require_contract(store)
    if not verify_password(password, contract.hashed_password):
        logger.warning("Rejected contract administrator password")
        raise Unauthorized("Unauthorized, method only available to contract Admins")
    return contract
