"""General UPI response codes from issuers, acquirers and the switch."""

from upi_codes.models import Category, Status
from upi_codes.tables.base import build_table, entry

B = Category.BUSINESS
T = Category.TECHNICAL
BT = Category.BUSINESS_TECHNICAL
OK = Status.SUCCESS
PENDING = Status.PENDING
REJECTED = Status.REJECTED

UPI_ERROR_CODES = build_table("general", [
    entry("00", "Approved or completed successfully", Category.SUCCESS, OK, "No action needed."),
    entry("000", "Success (alternate)", Category.SUCCESS, OK, "Same as 00."),
    entry("01", "Unable to process reversal / Account closed", B, REJECTED,
          "Reinitiate with same CRN; e.g., closed account in mandate presentation."),
    entry("02", "No such account", B, REJECTED, "Invalid beneficiary; recheck details."),
    entry("03", "Merchant VPA not found", T, REJECTED, "Invalid merchant; reinitiate."),
    entry("04", "Technical decline / Balance insufficient", BT, REJECTED,
          "Insufficient funds; top up account."),
    entry("05", "Technical failure (unauthorized request) / Not arranged for", BT, REJECTED,
          "Unauthorized or arrangement missing; reinitiate."),
    entry("091", "Timeout", T, PENDING, "Wait; do not reinitiate."),
    entry("10", "PIN block error", T, REJECTED, "Invalid PIN; retry."),
    entry("100", "PI (basic) attributes of demographic data did not match", B, REJECTED,
          "Aadhaar mismatch; verify details."),
    entry("12", "Invalid transaction", T, REJECTED, "Format/issue; reinitiate."),
    entry("125", "Transaction limit crossed", B, REJECTED, "Exceeds daily limit; wait or split."),
    entry("13", "Invalid amount field", T, REJECTED, "Amount error; correct and retry."),
    entry("14", "Invalid card number", T, REJECTED, "Wrong card; re-enter."),
    entry("15", "Issuer not live on UPI", T, REJECTED, "Bank not UPI-enabled; switch bank."),
    entry("17", "Customer cancellation", B, REJECTED, "User canceled; reinitiate if needed."),
    entry("20", "Invalid response code", T, REJECTED, "System error; retry."),
    entry("200", "PA (address) attributes of demographic data did not match", B, REJECTED,
          "Address mismatch; update."),
    entry("21", "No action taken", T, REJECTED, "System decline; retry."),
    entry("22", "Suspected malfunction", T, REJECTED, "Device/issue; try another app."),
    entry("30", "Invalid message format", T, REJECTED, "XML/format error; system fix."),
    entry("300", "Biometric data did not match", B, REJECTED, "Fingerprint/iris fail; retry."),
    entry("303", "Duplicate transaction ID", T, REJECTED, "Already processed; check status."),
    entry("310", "Duplicate fingers used", T, REJECTED, "Biometric duplicate; use different."),
    entry("311", "Duplicate irises used", T, REJECTED, "Same as above."),
    entry("312", "FMR and FIR cannot be used in same transaction", T, REJECTED,
          "Biometric rule violation."),
    entry("313", "Single FIR record contains more than one finger", T, REJECTED,
          "Format error in biometrics."),
    entry("314", "Number of FMR/FIR should not exceed 10", T, REJECTED, "Too many biometrics."),
    entry("315", "Number of IIR should not exceed 2", T, REJECTED, "Iris limit exceeded."),
    entry("34", "Suspected fraud", B, REJECTED, "Risk score high; contact bank."),
    entry("36", "Restricted card", B, REJECTED, "Card blocked; use another."),
    entry("40", "Invalid debit account", T, REJECTED, "Wrong account; select correct."),
    entry("400", "OTP validation failed", B, REJECTED, "Wrong OTP; regenerate."),
    entry("401", "Unauthorized request", T, REJECTED, "Auth fail; login again."),
    entry("404", "Record not available", T, REJECTED, "No data; check inputs."),
    entry("43", "Lost or stolen account/card", B, REJECTED, "Security block; report to bank."),
    entry("444", "Checksum error", T, REJECTED, "Data integrity issue; retry."),
    entry("500", "Internal server error / Invalid encryption", T, REJECTED,
          "Server down; wait and retry."),
    entry("510", "Invalid XML format", T, REJECTED, "Message format error."),
    entry("AM", "MPIN not set by customer", B, REJECTED, "Set PIN first."),
    entry("B1", "Registered mobile number changed/removed", B, REJECTED,
          "Update mobile with bank."),
    entry("B3", "Transaction not permitted to account (e.g., minor, NRE)", B, REJECTED,
          "Account restriction."),
    entry("CA", "Compliance error code for acquirer", B, REJECTED, "Regulatory issue at merchant."),
    entry("CI", "Compliance error code for issuer", B, REJECTED, "Regulatory issue at bank."),
    entry("DF", "Duplicate RRN found (beneficiary)", T, REJECTED, "Duplicate txn; check history."),
    entry("DT", "Duplicate RRN found (remitter)", T, REJECTED, "Same as above."),
    entry("K1", "Suspected fraud / Declined based on risk score (remitter)", B, REJECTED,
          "Fraud detection."),
    entry("NO", "No original request found during debit/credit", T, REJECTED, "Missing prior txn."),
    entry("PS", "Maximum balance exceeded (beneficiary bank)", B, REJECTED,
          "Account full; withdraw first."),
    entry("U13", "ACK not received or invalid", T, REJECTED,
          "Comms error (older code; now split)."),
    entry("U16", "Exceeded NPCI/bank limit", B, REJECTED, "Limit hit; wait 24 hours."),
    entry("U3", "Biometric data did not match (alternate)", B, REJECTED, "Auth fail."),
    entry("U30", "Generic failure (e.g., payer decline)", B, REJECTED, "User declined collect."),
    entry("U4", "Invalid encryption", T, REJECTED, "Security issue."),
    entry("U5", "Invalid XML format (alternate)", T, REJECTED, "Format error."),
    entry("X6", "Invalid merchant (acquirer)", B, REJECTED, "Merchant invalid."),
    entry("X7", "Merchant not reachable (acquirer)", T, REJECTED, "Connectivity issue."),
    entry("XB", "Invalid transaction (remitter, no appropriate code)", T, REJECTED,
          "Catch-all remitter error."),
    entry("XC", "Invalid transaction (beneficiary, no appropriate code)", T, REJECTED,
          "Catch-all beneficiary error."),
    entry("XD", "Invalid amount (remitter)", T, REJECTED, "Amount error sender side."),
    entry("XE", "Invalid amount (beneficiary)", T, REJECTED, "Amount error receiver side."),
    entry("XF", "Format error (remitter)", T, REJECTED, "Invalid format sender."),
    entry("XG", "Format error (beneficiary)", T, REJECTED, "Invalid format receiver."),
    entry("XH", "Account does not exist (remitter)", B, REJECTED, "Sender account invalid."),
    entry("XI", "Account does not exist (beneficiary)", B, REJECTED, "Receiver account invalid."),
    entry("XJ", "Requested function not supported (remitter)", T, REJECTED,
          "Feature unavailable sender."),
    entry("XK", "Requested function not supported (beneficiary)", T, REJECTED,
          "Feature unavailable receiver."),
    entry("XL", "Expired card (remitter)", B, REJECTED, "Card expired."),
    entry("XM", "Expired card (beneficiary)", B, REJECTED, "Same."),
    entry("XN", "No card record (remitter)", T, REJECTED, "No card data."),
    entry("XO", "No card record (beneficiary)", T, REJECTED, "Same."),
    entry("XP", "Transaction not permitted to cardholder (remitter)", B, REJECTED,
          "Permission denied."),
    entry("XQ", "Transaction not permitted to cardholder (beneficiary)", B, REJECTED, "Same."),
    entry("XR", "Restricted card (remitter)", B, REJECTED, "Restricted."),
    entry("XS", "Restricted card (beneficiary)", B, REJECTED, "Same."),
    entry("XT", "Cut-off in process (remitter)", T, REJECTED, "Maintenance window."),
    entry("XU", "Cut-off in process (beneficiary)", T, REJECTED, "Same."),
    entry("XV", "Compliance violation (remitter)", B, REJECTED, "Regulatory block."),
    entry("XW", "Compliance violation (beneficiary)", B, REJECTED, "Same."),
    entry("XY", "Remitter CBS offline", T, REJECTED, "Sender bank down."),
    entry("Y1", "Beneficiary CBS offline", T, REJECTED, "Receiver bank down."),
    entry("YA", "Lost or stolen card (remitter)", B, REJECTED, "Security."),
    entry("YB", "Lost or stolen card (beneficiary)", B, REJECTED, "Same."),
    entry("YC", "Do not honour (remitter)", B, REJECTED, "Bank decline."),
    entry("YD", "Do not honour (beneficiary)", B, REJECTED, "Same."),
])
