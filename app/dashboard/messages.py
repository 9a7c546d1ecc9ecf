"""
Operator-facing strings (Hebrew UI).
Keep wording stable; tests and the template rely on these values.
"""

LOAD_ERROR_PREFIX = "שגיאה בטעינת הנתונים"
SEND_ERROR_PREFIX = "שליחת ההתראה נכשלה"
SEND_SUCCESS = "ההתראה נשלחה בהצלחה!"

NO_ACTIVE_CLIENTS = "לא נמצאו לקוחות פעילים."
NO_RECENT_REQUESTS = "לא נמצאו בקשות אחרונות."

NOTIFY_BUTTON_LABEL = "שלח התראה"
SUBMIT_IDLE_LABEL = "שלח עכשיו"
SUBMIT_BUSY_LABEL = "שולח..."


def load_error(detail: str) -> str:
    return f"{LOAD_ERROR_PREFIX}: {detail}"


def send_error(detail: str) -> str:
    return f"{SEND_ERROR_PREFIX}: {detail}"
