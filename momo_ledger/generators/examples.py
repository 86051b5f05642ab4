"""Sample confirmation messages as delivered by the gateway."""

EXAMPLE_SMS: dict[str, str] = {
    "bank_transfer": (
        "DBC1MV31SMJ Confirmed. Tsh16,000.00 sent to TIPS-NMB for account 24610037018 "
        "on 12/2/26 at 11:37 AM. Total fee Tsh975. New balance Tsh635.90"
    ),
    "money_send": (
        "DBC1MV31SMK Confirmed. You have sent Tsh10,000.00 to John Doe +255712345678 "
        "on 11/2/26 at 10:15 AM. Total fee Tsh100. New balance Tsh1,500.00"
    ),
    "money_receive": (
        "DBC1MV31SMZ Confirmed. You have received Tsh5,000.00 from Jane Smith +255798765432 "
        "on 13/2/26. New balance Tsh6,500.00"
    ),
    "withdraw": (
        "DBC1MV31SMA Confirmed. Tsh20,000.00 withdrawn on 10/2/26 at 2:30 PM. "
        "Total fee Tsh500. New balance Tsh15,000.00"
    ),
    "pay_bill": (
        "DBC1MV31SMB Confirmed. You paid Tsh1,500.00 to TANESCO on 12/2/26. "
        "Total fee Tsh50. New balance Tsh8,000.00"
    ),
    # Same transaction ID as bank_transfer, re-delivered without date and fee
    "bank_transfer_duplicate": (
        "DBC1MV31SMJ Confirmed. Tsh16,000.00 sent to TIPS-NMB for account 24610037018. "
        "New balance Tsh635.90"
    ),
    "agent_withdraw": (
        "DBC2KQ88TRW Confirmed. On 2/2/26 at 4:05 PM Withdraw Tsh50,000.00 from "
        "1396099 - MILGRETH SAULI MDUDA on 2/2/26. Total fee Tsh2,200. "
        "Government Levy Tsh360. New balance Tsh12,340.00"
    ),
}

# Bank transfer, its duplicate, a send, a receive and a withdrawal
DEDUP_SCENARIO: tuple[str, ...] = (
    EXAMPLE_SMS["bank_transfer"],
    EXAMPLE_SMS["bank_transfer_duplicate"],
    EXAMPLE_SMS["money_send"],
    EXAMPLE_SMS["money_receive"],
    EXAMPLE_SMS["withdraw"],
)
