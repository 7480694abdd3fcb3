"""Resolution of the accounts an instruction names."""

import logging
from typing import List

from payinstruct.models.account import Account
from payinstruct.models.constants import PaymentMessage, StatusCode
from payinstruct.models.instruction import ParsedInstruction
from payinstruct.result import Err, Ok, Result

logger = logging.getLogger(__name__)


def resolve_involved_accounts(
    accounts: List[Account],
    instruction: ParsedInstruction,
) -> Result[List[Account]]:
    """Pick the debit and credit accounts out of the supplied list.

    Accounts keep the order of the supplied list, so callers must look them up
    by id. A missing debit account is reported before a missing credit account.

    Args:
        accounts: Every account supplied with the request
        instruction: Parsed instruction naming the two account ids

    Returns:
        Ok with the involved accounts, or Err(AC03) naming the missing id
    """
    wanted = (instruction.debit_account_id, instruction.credit_account_id)
    involved = [account for account in accounts if account.id in wanted]
    found_ids = {account.id for account in involved}

    for account_id in wanted:
        if account_id not in found_ids:
            logger.debug(f"Account {account_id} not in supplied list of {len(accounts)}")
            return Err(
                code=StatusCode.ACCOUNT_NOT_FOUND,
                message=PaymentMessage.account_not_found(account_id),
            )

    return Ok(involved)
