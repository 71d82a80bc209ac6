"""UPI Autopay mandate registration response codes (``AP##``)."""

from upi_codes.models import Category, Status
from upi_codes.tables.base import build_table, entry

B = Category.BUSINESS
T = Category.TECHNICAL
REJECTED = Status.REJECTED

MANDATE_ERROR_CODES = build_table("mandate", [
    entry("AP01", "Account blocked", B, REJECTED, "Account is blocked; contact bank."),
    entry("AP02", "Account closed", B, REJECTED, "Account is closed; use another account."),
    entry("AP03", "Account frozen", B, REJECTED, "Account frozen; contact bank."),
    entry("AP04", "Account inoperative", B, REJECTED, "Account dormant; activate with bank."),
    entry("AP05", "No such account", B, REJECTED, "Invalid account; check details."),
    entry("AP06", "Not a CBS account no. or old account no. represented with CBS no", B, REJECTED,
          "Invalid account format; update to CBS."),
    entry("AP07", "Refer to the branch – KYC not completed", B, REJECTED,
          "Complete KYC at branch."),
    entry("AP08", "Account holder name mismatch with CBS", B, REJECTED,
          "Name mismatch; verify details."),
    entry("AP09", "Account type in mandate is different from CBS", B, REJECTED,
          "Account type mismatch; correct it."),
    entry("AP10", "Amount exceeds e-mandate limit", B, REJECTED, "Exceeds limit; reduce amount."),
    entry("AP11", "Authentication failed", T, REJECTED, "Auth failed; retry authentication."),
    entry("AP12", "Amount of EMI more than limit allowed for the account", B, REJECTED,
          "EMI exceeds limit; adjust."),
    entry("AP13", "Invalid monthly EMI amount. Full loan amount mentioned", T, REJECTED,
          "Invalid EMI; specify correct amount."),
    entry("AP14", "Invalid user credentials", T, REJECTED, "Wrong credentials; re-enter."),
    entry("AP15", "Mandate not registered – not maintaining required balance", B, REJECTED,
          "Insufficient balance for registration."),
    entry("AP16", "Mandate not registered – minor account", B, REJECTED,
          "Minor account; not allowed."),
    entry("AP17", "Mandate not registered – NRE account", B, REJECTED,
          "NRE account; not supported."),
    entry("AP18", "Mandate registration not allowed for CC account", B, REJECTED,
          "Credit card account; use savings/current."),
    entry("AP19", "Mandate registration not allowed for PF account", B, REJECTED,
          "PF account; not supported."),
    entry("AP20", "Mandate registration not allowed for PPF account", B, REJECTED,
          "PPF account; not supported."),
    entry("AP21", "Payment stopped by attachment order", B, REJECTED,
          "Stopped by order; contact bank."),
    entry("AP22", "Payment stopped by court order", B, REJECTED, "Court order; resolve legally."),
    entry("AP23", "Transaction rejected or cancelled by the customer", B, REJECTED,
          "Customer cancelled; reinitiate if needed."),
    entry("AP24", "Account not in regular status", B, REJECTED, "Irregular account; regularize."),
    entry("AP25", "Withdrawal stopped owing to insolvency of account", B, REJECTED,
          "Insolvency; contact bank."),
    entry("AP26", "Withdrawal stopped owing to lunacy of account holder", B, REJECTED,
          "Legal issue; resolve."),
    entry("AP27", "Invalid frequency", T, REJECTED, "Wrong frequency; correct mandate."),
    entry("AP28", "Mandate registration failed – please contact your home branch", B, REJECTED,
          "Contact branch for assistance."),
    entry("AP29", "Technical errors or connectivity issues at backend", T, REJECTED,
          "Backend issue; retry later."),
    entry("AP30", "Browser closed by customer mid-transaction", B, REJECTED,
          "Transaction aborted; restart."),
    entry("AP31", "Mandate registration not allowed for joint account", B, REJECTED,
          "Joint account; use individual."),
    entry("AP32", "Mandate registration not allowed for wallet account", B, REJECTED,
          "Wallet; use bank account."),
    entry("AP33", "User rejected the transaction on pre-login page", B, REJECTED,
          "User rejected; try again."),
    entry("AP34", "Account number not registered with netbanking facility", B, REJECTED,
          "Enable netbanking."),
    entry("AP35", "Debit card validation failed – invalid card number", T, REJECTED,
          "Invalid card; check number."),
    entry("AP36", "Debit card validation failed – invalid expiry date", T, REJECTED,
          "Invalid expiry; check date."),
    entry("AP37", "Debit card validation failed – invalid PIN", T, REJECTED, "Wrong PIN; retry."),
    entry("AP38", "Debit card validation failed – invalid CVV", T, REJECTED, "Wrong CVV; check."),
    entry("AP39", "OTP invalid", T, REJECTED, "Invalid OTP; regenerate."),
    entry("AP40", "Maximum tries exceeded for OTP", T, REJECTED,
          "OTP tries exceeded; wait and retry."),
    entry("AP41", "Time expired for OTP", T, REJECTED, "OTP expired; regenerate."),
    entry("AP42", "Debit card not activated", B, REJECTED, "Activate card."),
    entry("AP43", "Debit card blocked", B, REJECTED, "Card blocked; unblock."),
    entry("AP44", "Debit card hotlisted", B, REJECTED, "Card hotlisted; report lost."),
    entry("AP45", "Debit card expired", B, REJECTED, "Card expired; renew."),
    entry("AP46", "No response received from customer during transaction", B, REJECTED,
          "No response; retry transaction."),
    entry("AP47", "Account number registered for only view rights in netbanking", B, REJECTED,
          "View-only; enable transactions."),
    entry("AP48", "Aadhaar number does not match with debtor", B, REJECTED,
          "Aadhaar mismatch; verify."),
    entry("AP65", "Account number not linked with given debit card", B, REJECTED,
          "Link account with debit card."),
    entry("AP66", "No response received from bank within prescribed time limit", T, REJECTED,
          "Bank timeout; retry later."),
])
