"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

ALL_LABEL = "Semua"
NO_CLASS_LABEL = "Tidak Ada"

MONTHS = (
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
)

SEMESTER_MONTHS = {
    "1": MONTHS[6:],
    "2": MONTHS[:6],
}

REPORT_HEADERS = ("Nama", "Kelas", "Hadir", "Alpha", "Izin", "Sakit", "% Hadir")
TOTAL_LABEL = "TOTAL"
PERCENT_LABEL = "PERSEN"
NOT_AVAILABLE = "N/A"

SPREADSHEET_ERROR_MARKERS = frozenset({"#N/A", "#REF!", "#VALUE!", "#ERROR!"})

HISTORY_SHEET_NAME = "absensi"
EMPTY_HISTORY_MESSAGE = "Tidak ada data di sheet Absensi"

DEFAULT_REQUEST_TIMEOUT = 15
DEFAULT_DELETE_ALL_TIMEOUT = 30
DEFAULT_PLACE_NAME = "Makassar"

LOCAL_DATA_KEYS = (
    "students",
    "studentData",
    "dataSiswa",
    "siswaData",
    "studentList",
    "daftarSiswa",
)
LOCAL_DATA_KEY_FRAGMENTS = ("student", "siswa", "data")
