"""
Integration tests for the Credit API endpoints.

These tests verify:
1. POST /v1/credits - Credit application and its validation rules
2. GET /v1/credits?customerId= - Listing a customer's credits
3. GET /v1/credits/{creditCode}?customerId= - Ownership-checked lookup
"""

from datetime import date, timedelta
from decimal import Decimal
from uuid import UUID, uuid4

import pytest
from dateutil.relativedelta import relativedelta
from httpx import AsyncClient

OTHER_VALID_CPF = "52998224725"


# =============================================================================
# POST /v1/credits Tests
# =============================================================================

class TestSaveCredit:
    """Tests for POST /v1/credits endpoint."""

    @pytest.mark.asyncio
    async def test_create_credit_returns_201(
        self,
        client: AsyncClient,
        customer_id: int,
        credit_body,
    ):
        """A valid application for an existing customer is created as pending."""
        response = await client.post("/v1/credits", json=credit_body(customer_id))

        assert response.status_code == 201

        data = response.json()
        UUID(data["credit_code"])
        assert Decimal(str(data["credit_value"])) == Decimal("100")
        assert data["number_of_installments"] == 15
        assert data["status"] == "pending"
        assert data["email_customer"] == "camila@email.com"
        assert Decimal(str(data["income_customer"])) == Decimal("1000")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("installments", [1, 24, 48])
    async def test_installments_within_bounds_accepted(
        self,
        client: AsyncClient,
        customer_id: int,
        credit_body,
        installments: int,
    ):
        response = await client.post(
            "/v1/credits",
            json=credit_body(customer_id, number_of_installments=installments),
        )

        assert response.status_code == 201
        assert response.json()["number_of_installments"] == installments

    @pytest.mark.asyncio
    @pytest.mark.parametrize("installments", [-1, 0, 49, 100])
    async def test_installments_out_of_bounds_rejected(
        self,
        client: AsyncClient,
        customer_id: int,
        credit_body,
        installments: int,
    ):
        """Installment counts outside [1, 48] are a client error."""
        response = await client.post(
            "/v1/credits",
            json=credit_body(customer_id, number_of_installments=installments),
        )

        assert response.status_code == 400

        data = response.json()
        assert data["error"] == "INVALID_CREDIT_REQUEST"
        assert data["exception"] == "InvalidCreditRequestException"
        assert "number_of_installments" in data["details"]

    @pytest.mark.asyncio
    async def test_first_installment_three_months_out_rejected(
        self,
        client: AsyncClient,
        customer_id: int,
        credit_body,
    ):
        """The first installment must be less than three months away."""
        first = date.today() + relativedelta(months=3)
        response = await client.post(
            "/v1/credits",
            json=credit_body(customer_id, day_first_installment=first.isoformat()),
        )

        assert response.status_code == 400
        assert "day_first_installment" in response.json()["details"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("days_from_today", [0, -1, -30])
    async def test_first_installment_not_in_future_rejected(
        self,
        client: AsyncClient,
        customer_id: int,
        credit_body,
        days_from_today: int,
    ):
        first = date.today() + timedelta(days=days_from_today)
        response = await client.post(
            "/v1/credits",
            json=credit_body(customer_id, day_first_installment=first.isoformat()),
        )

        assert response.status_code == 400
        assert "day_first_installment" in response.json()["details"]

    @pytest.mark.asyncio
    async def test_first_installment_tomorrow_accepted(
        self,
        client: AsyncClient,
        customer_id: int,
        credit_body,
    ):
        first = date.today() + timedelta(days=1)
        response = await client.post(
            "/v1/credits",
            json=credit_body(customer_id, day_first_installment=first.isoformat()),
        )

        assert response.status_code == 201

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "missing",
        ["credit_value", "day_first_installment", "number_of_installments", "customer_id"],
    )
    async def test_missing_field_rejected(
        self,
        client: AsyncClient,
        customer_id: int,
        credit_body,
        missing: str,
    ):
        """Absent required fields are reported per field with 400."""
        body = credit_body(customer_id)
        del body[missing]

        response = await client.post("/v1/credits", json=body)

        assert response.status_code == 400

        data = response.json()
        assert data["error"] == "VALIDATION_ERROR"
        assert missing in data["details"]

    @pytest.mark.asyncio
    async def test_non_positive_value_rejected(
        self,
        client: AsyncClient,
        customer_id: int,
        credit_body,
    ):
        response = await client.post(
            "/v1/credits",
            json=credit_body(customer_id, credit_value="0"),
        )

        assert response.status_code == 400
        assert "credit_value" in response.json()["details"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("customer_id", [99999999999999999999999, 2147483648, 0])
    async def test_out_of_range_customer_id_rejected(
        self,
        client: AsyncClient,
        credit_body,
        customer_id: int,
    ):
        response = await client.post("/v1/credits", json=credit_body(customer_id))

        assert response.status_code == 400

        data = response.json()
        assert data["error"] == "VALIDATION_ERROR"
        assert "customer_id" in data["details"]

    @pytest.mark.asyncio
    async def test_rejected_credit_is_not_persisted(
        self,
        client: AsyncClient,
        customer_id: int,
        credit_body,
    ):
        await client.post(
            "/v1/credits",
            json=credit_body(customer_id, number_of_installments=49),
        )

        response = await client.get("/v1/credits", params={"customerId": customer_id})

        assert response.status_code == 200
        assert response.json() == []


# =============================================================================
# GET /v1/credits Tests
# =============================================================================

class TestFindAllByCustomer:
    """Tests for GET /v1/credits?customerId= endpoint."""

    @pytest.mark.asyncio
    async def test_returns_customer_credits_in_insertion_order(
        self,
        client: AsyncClient,
        customer_id: int,
        credit_body,
    ):
        codes = []
        for value in ("100.00", "200.00", "300.00"):
            response = await client.post(
                "/v1/credits",
                json=credit_body(customer_id, credit_value=value),
            )
            codes.append(response.json()["credit_code"])

        response = await client.get("/v1/credits", params={"customerId": customer_id})

        assert response.status_code == 200

        data = response.json()
        assert [c["credit_code"] for c in data] == codes
        assert [Decimal(str(c["credit_value"])) for c in data] == [
            Decimal("100"),
            Decimal("200"),
            Decimal("300"),
        ]
        assert set(data[0]) == {"credit_code", "credit_value", "number_of_installments"}

    @pytest.mark.asyncio
    async def test_customer_without_credits_returns_empty_list(
        self,
        client: AsyncClient,
        customer_id: int,
        credit_body,
    ):
        """A customer with no credits gets 200 and an empty list."""
        await client.post("/v1/credits", json=credit_body(customer_id))

        response = await client.get("/v1/credits", params={"customerId": customer_id + 1})

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_missing_customer_id_rejected(self, client: AsyncClient):
        response = await client.get("/v1/credits")

        assert response.status_code == 400
        assert "customerId" in response.json()["details"]

    @pytest.mark.asyncio
    async def test_out_of_range_customer_id_rejected(self, client: AsyncClient):
        response = await client.get(
            "/v1/credits",
            params={"customerId": "99999999999999999999999"},
        )

        assert response.status_code == 400
        assert "customerId" in response.json()["details"]


# =============================================================================
# GET /v1/credits/{creditCode} Tests
# =============================================================================

class TestFindByCreditCode:
    """Tests for GET /v1/credits/{creditCode}?customerId= endpoint."""

    @pytest.mark.asyncio
    async def test_owner_can_fetch_credit(
        self,
        client: AsyncClient,
        customer_id: int,
        credit_body,
    ):
        created = await client.post("/v1/credits", json=credit_body(customer_id))
        credit_code = created.json()["credit_code"]

        response = await client.get(
            f"/v1/credits/{credit_code}",
            params={"customerId": customer_id},
        )

        assert response.status_code == 200

        data = response.json()
        assert data["credit_code"] == credit_code
        assert data["status"] == "pending"
        assert data["email_customer"] == "camila@email.com"

    @pytest.mark.asyncio
    async def test_unknown_credit_code_returns_not_found(
        self,
        client: AsyncClient,
        customer_id: int,
        credit_body,
    ):
        await client.post("/v1/credits", json=credit_body(customer_id))

        response = await client.get(
            f"/v1/credits/{uuid4()}",
            params={"customerId": customer_id},
        )

        assert response.status_code == 404

        data = response.json()
        assert data["error"] == "CREDIT_NOT_FOUND"
        assert data["exception"] == "CreditNotFoundException"

    @pytest.mark.asyncio
    async def test_credit_of_another_customer_is_business_error(
        self,
        client: AsyncClient,
        customer_id: int,
        customer_body,
        credit_body,
    ):
        """An existing code under the wrong customer is not reported as not-found."""
        other = await client.post(
            "/v1/customers",
            json=customer_body(cpf=OTHER_VALID_CPF, email="other@email.com"),
        )
        other_id = other.json()["id"]

        created = await client.post("/v1/credits", json=credit_body(customer_id))
        credit_code = created.json()["credit_code"]

        response = await client.get(
            f"/v1/credits/{credit_code}",
            params={"customerId": other_id},
        )

        assert response.status_code == 400

        data = response.json()
        assert data["error"] == "CREDIT_OWNERSHIP_MISMATCH"
        assert data["exception"] == "CreditOwnershipException"
        assert data["message"] == "This credit does not belong to this customer"

    @pytest.mark.asyncio
    async def test_invalid_credit_code_format_rejected(
        self,
        client: AsyncClient,
        customer_id: int,
    ):
        response = await client.get(
            "/v1/credits/not-a-uuid",
            params={"customerId": customer_id},
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_out_of_range_customer_id_rejected(self, client: AsyncClient):
        response = await client.get(
            f"/v1/credits/{uuid4()}",
            params={"customerId": "99999999999999999999999"},
        )

        assert response.status_code == 400
        assert "customerId" in response.json()["details"]
