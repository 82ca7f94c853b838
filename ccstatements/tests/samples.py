"""
Converter-style text of a small statement that reconciles.
"""

STATEMENT_TEXT = """\
                                      ACCOUNT SUMMARY
   Account Number: 4147 2020 1111 3456
   Previous Balance                                 $1,000.00
   Payment, Credits                                 -$1,000.00
   Purchases                                        +$1,254.56
   Cash Advances                                    $0.00
   Fees Charged                                     +$25.00
   New Balance                                      $1,279.56
   Opening/Closing Date                             12/26/17 - 01/25/18

                                      ACCOUNT ACTIVITY
      Date of
    Transaction         Merchant Name or Transaction Description              $ Amount
   PAYMENTS AND OTHER CREDITS
   01/10      AUTOMATIC PAYMENT - THANK YOU                                 -1,000.00
   PURCHASE
   12/27      AMAZON MKTPLACE PMTS AMZN.COM/BILL WA                             54.56
   01/05`     DELTA AIR LINES ATLANTA                                        1,200.00
   FEES CHARGED
   01/25      ANNUAL MEMBERSHIP FEE                                             25.00
   PURCHASES AND REDEMPTIONS
   01/12 & 01/13   REDEEMED POINTS FOR STATEMENT CREDIT                         -5.00
                                        Page 1 of 1
"""


def statement_text(purchases_header: str = "+$1,254.56") -> str:
    """Sample statement text with an optionally altered Purchases subtotal."""
    return STATEMENT_TEXT.replace("+$1,254.56", purchases_header)
