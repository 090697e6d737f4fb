"""Loan policy constants used by the decision engine"""

# Loan amount bounds, in euros
MINIMUM_LOAN_AMOUNT = 2000
MAXIMUM_LOAN_AMOUNT = 10000
LOAN_AMOUNT_STEP = 100

# Loan period bounds, in months
MINIMUM_LOAN_PERIOD = 12
MAXIMUM_LOAN_PERIOD = 60

# Credit modifiers per identity code segment (debt segment is 0)
SEGMENT_1_CREDIT_MODIFIER = 100
SEGMENT_2_CREDIT_MODIFIER = 300
SEGMENT_3_CREDIT_MODIFIER = 1000

# Approval threshold for the credit score
MINIMUM_CREDIT_SCORE = 0.1

# Age bounds: a loan must be repaid before the expected lifetime is reached
MINIMUM_AGE = 18
EXPECTED_LIFETIME = 81
MAXIMUM_AGE = EXPECTED_LIFETIME - MAXIMUM_LOAN_PERIOD // 12
