from decimal import Decimal

from falcon_workforce.payroll.calculator.standard_calculator import StandardPayrollCalculator
from falcon_workforce.payroll.model import PayInput, PayRate


def test_base_pay_only():
    calc = StandardPayrollCalculator()

    pay = calc.calculate_pay(PayInput(hours_worked=Decimal("7.5")), PayRate(hourly_rate=Decimal("20")))

    assert pay == Decimal("150.00")


def test_overtime_is_time_and_a_half_plus_commission():
    calc = StandardPayrollCalculator()
    pay_input = PayInput(hours_worked=Decimal("8"), overtime_hours=Decimal("2"), total_sales=Decimal("1000"))
    rate = PayRate(hourly_rate=Decimal("20"), commission_rate=Decimal("0.05"))

    # 160 base + 60 overtime + 50 commission
    assert calc.calculate_pay(pay_input, rate) == Decimal("270.00")


def test_sales_without_commission_rate_earn_nothing():
    calc = StandardPayrollCalculator()

    pay = calc.calculate_pay(
        PayInput(hours_worked=Decimal("1"), total_sales=Decimal("500")),
        PayRate(hourly_rate=Decimal("15.333")),
    )

    assert pay == Decimal("15.33")
