"""
Column headers of a mortgage loan spreadsheet.

Used to test best-match selection against a realistic list of near-duplicate
labels (numbered variants, stray brackets, trailing spaces).
"""

LOAN_HEADERS = [
    "XYZ Loan Number",
    "Seller Loan Number",
    "Borrower Number",
    "First Name",
    "Middle Name",
    "Last Name",
    "Suffix",
    "SSN",
    "Birth Date",
    "Marital Status",
    "US Citizen",
    "Citizenship Type",
    "Permanent Resident Alien",
    "Identification Issuer",
    "Identification Number",
    "Identification Type",
    "Military Status",
    "Honorable Discharge",
    "Intent to Occupy",
    "First Time Homebuyer",
    "Email ",
    "Phone",
    "Fax",
    "Alternate Name 1",
    "Alternate Name 2",
    "Alternate Name 3",
    "Alternate Name 4",
    "Alternate Name 5",
    "No of Dependents",
    "Dependents age 1",
    "Dependents age 2",
    "Dependents age 3",
    "Dependents age 4",
    "I do not wish to furnish this information",
    "Ethnicity",
    "Race 1 ",
    "Race 2 ",
    "Race 3",
    "Race 4",
    "Race 5",
    "Sex",
    "Present Address Rent Box Checked",
    "Present Address Street 1",
    "Present Address Street 2",
    "Present Address City",
    "Present Address State",
    "Present Address Zip",
    "Present Address Years in Residence",
    "Present Address Home Phone",
    "Present Rent",
    "Present First Mortgage (P&I)",
    "Present Hazard",
    "Present HOA Dues",
    "Present MI",
    "Present Other",
    "Present Other Financning (P&I)",
    "Present Real Estate Taxes",
    "Present Total",
    "Former Address Rent Box Checked",
    "Former Address Street 1",
    "Former Address Street 2",
    "Former Address City",
    "Former Address State",
    "Former Address Zip",
    "Former Address Years in Residence",
    "Mailing Address Street 1",
    "Mailing Address Street 2",
    "Mailing Address City",
    "Mailing Address State",
    "Mailing Address Zip",
    "Employer 1",
    "Employer 1 Address City",
    "Employer 1 Address State",
    "Employer 1 Address Street",
    "Employer 1 Address Street 2",
    "Employer 1 Address Zip",
    "Employer 1 Mthly Income",
    "Employer 1 Phone",
    "Employer 1 Position",
    "Employer 1 Self Employed",
    "Employer 1 Years in Line of Work",
    "Employer 1 Yrs on Job",
    "Employer 2",
    "Employer 2 Address City",
    "Employer 2 Address State",
    "Employer 2 Address Street",
    "Employer 2 Address Street 2",
    "Employer 2 Address Zip",
    "Employer 2 Begin Date",
    "Employer 2 End Date",
    "Employer 2 Mthly Income",
    "Employer 2 Phone",
    "Employer 2 Position",
    "Employer 2 Self Employed",
    "[Indicator if Retired?]",
    "Base Income",
    "Bonuses Income",
    "Commission Income",
    "Dividend/Interest Income",
    "Net Rental Income",
    "OT Income",
    "Other Income",
    "total_monthly_income",
    "borrower_monthly_wage_income",
    "Equifax Beacon Score",
    "Experian Score",
    "Trans Union - Empirica Score",
    "Borrower_Exclude",
]

# (query, expected index, expected similarity) under the default options
HEADER_BEST_MATCHES = [
    ("Indicator if Retired?", 94, 0.942028985507246),
    ("Present Other Financing", 55, 0.855652173913043),
    ("Present Address Street", 42, 0.95),
]
