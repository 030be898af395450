"""
Application-wide constants.
Centralizes magic numbers and reference data.
"""

# Invoice numbering
INVOICE_NUMBER_PREFIX = "INV"
INVOICE_SEQUENCE_WIDTH = 3

# Invoice defaults
DEFAULT_SERVICE_DESCRIPTION = "Consultation / Professional service"
MAX_GST_RATE = 28

# Appointment views
OTHER_DATE_BUCKET = "other"  # group key for appointments without a date
DAYS_IN_WEEK = 7
COUNT_BADGE_LIMIT = 9  # calendar strip shows "9+" above this

# Validation limits
MAX_NAME_LENGTH = 200
MAX_NOTES_LENGTH = 1000

# GST state codes (first two digits of a GSTIN) -> state / union territory
INDIAN_STATES = {
    "01": "Jammu and Kashmir",
    "02": "Himachal Pradesh",
    "03": "Punjab",
    "04": "Chandigarh",
    "05": "Uttarakhand",
    "06": "Haryana",
    "07": "Delhi",
    "08": "Rajasthan",
    "09": "Uttar Pradesh",
    "10": "Bihar",
    "11": "Sikkim",
    "12": "Arunachal Pradesh",
    "13": "Nagaland",
    "14": "Manipur",
    "15": "Mizoram",
    "16": "Tripura",
    "17": "Meghalaya",
    "18": "Assam",
    "19": "West Bengal",
    "20": "Jharkhand",
    "21": "Odisha",
    "22": "Chhattisgarh",
    "23": "Madhya Pradesh",
    "24": "Gujarat",
    "26": "Dadra and Nagar Haveli and Daman and Diu",
    "27": "Maharashtra",
    "29": "Karnataka",
    "30": "Goa",
    "31": "Lakshadweep",
    "32": "Kerala",
    "33": "Tamil Nadu",
    "34": "Puducherry",
    "35": "Andaman and Nicobar Islands",
    "36": "Telangana",
    "37": "Andhra Pradesh",
    "38": "Ladakh",
    "97": "Other Territory",
}
