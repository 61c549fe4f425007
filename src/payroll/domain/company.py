"""Company usecase."""

import logging
from http import HTTPStatus

from payroll.database.base import CompanyRepository
from payroll.domain.entities import Company
from payroll.domain.requests import CompanyRequest, TopupCompanyBalance, company_from_request

logger = logging.getLogger(__name__)


class CompanyUsecase:
    """Usecase for the company profile and its balance.

    Each operation returns the company with the transport status on
    success. Repository errors are raised unchanged and carry their own
    status code (see ``payroll.domain.errors.status_of``).
    """

    def __init__(self, company_repo: CompanyRepository):
        """Initialize company usecase.

        Args:
            company_repo: Company repository
        """
        self.company_repo = company_repo

    def get_company_info(self) -> tuple[Company, HTTPStatus]:
        """Get the company profile.

        Raises:
            NotFoundError: If the company has not been set up
        """
        company = self.company_repo.get()
        logger.debug("Loaded company %s", company.id)
        return company, HTTPStatus.OK

    def create_or_update_company(self, request: CompanyRequest) -> tuple[Company, HTTPStatus]:
        """Create the company, or overwrite its profile if it already exists.

        Args:
            request: Name, address and balance of the company

        Returns:
            Stored company and status
        """
        company = self.company_repo.create_or_update(company_from_request(request))
        logger.info("Saved company profile %r", company.name)
        return company, HTTPStatus.OK

    def topup_balance(self, request: TopupCompanyBalance) -> tuple[Company, HTTPStatus]:
        """Credit the company balance.

        The amount is validated by storage, not here.

        Args:
            request: Amount to add

        Returns:
            Company with the new balance and status
        """
        company = self.company_repo.add_balance(request.balance)
        logger.info("Topped up company balance by %s", request.balance)
        return company, HTTPStatus.OK
