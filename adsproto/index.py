"""Well-known ADS index groups."""

# PLC memory areas.
PLC_RW_M = 0x4020
PLC_RW_MX = 0x4021
PLC_SIZE_M = 0x4025
PLC_RW_RB = 0x4030
PLC_SIZE_RB = 0x4035
PLC_RW_DB = 0x4040
PLC_SIZE_DB = 0x4045

# Symbol access.
GET_SYMHANDLE_BYNAME = 0xF003
RW_SYMVAL_BYHANDLE = 0xF005
RELEASE_SYMHANDLE = 0xF006

SYMTAB = 0xF000
SYMNAME = 0xF001
SYMVAL = 0xF002
GET_SYMVAL_BYNAME = 0xF004
GET_SYMINFO_BYNAME = 0xF007
GET_SYMVERSION = 0xF008
GET_SYMINFO_BYNAME_EX = 0xF009
SYM_DOWNLOAD = 0xF00A
SYM_UPLOAD = 0xF00B
SYM_UPLOAD_INFO = 0xF00C
SYM_DOWNLOAD2 = 0xF00D
SYM_DT_UPLOAD = 0xF00E
SYM_UPLOAD_INFO2 = 0xF00F
SYM_NOTE = 0xF010

# Process images of physical inputs and outputs.
IO_RW_I = 0xF020
IO_RW_IX = 0xF021
IO_SIZE_I = 0xF025

IO_RW_Q = 0xF030
IO_RW_QX = 0xF031
IO_SIZE_Q = 0xF035

IO_CLEAR_I = 0xF040
IO_CLEAR_O = 0xF050
IO_RW_IOB = 0xF060

# Combined ("sum-up") requests.
SUMUP_READ = 0xF080
SUMUP_WRITE = 0xF081
SUMUP_READWRITE = 0xF082
SUMUP_READ_EX = 0xF083
SUMUP_READ_EX_2 = 0xF084
SUMUP_ADDDEVNOTE = 0xF085
SUMUP_DELDEVNOTE = 0xF086

DEVICE_DATA = 0xF100

# File service.
FILE_OPEN = 120
FILE_CLOSE = 121
FILE_READ = 122
FILE_WRITE = 123
FILE_DELETE = 131
FILE_BROWSE = 133

TARGET_DESC = 0x2BC

LICENSE = 0x0101_0004
LICENSE_MODULES = 0x0101_0006

# Undocumented groups used with the system service.
WIN_REGISTRY = 200
EXECUTE = 500
TC_TARGET_XML = 700
ROUTE_ADD = 801
ROUTE_REMOVE = 802
ROUTE_LIST = 803