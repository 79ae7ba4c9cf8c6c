"""Well-known AMS ports."""

AMS_ROUTER = 1
AMS_DEBUGGER = 2
TCOM_SERVER = 10
TCOM_SERVER_TASK = 11
TCOM_SERVER_PASSIVE = 12
TCAT_DEBUGGER = 20
TCAT_DEBUGGER_TASK = 21
LICENSE_SERVER = 30
LOGGER = 100
EVENT_LOGGER = 110
APPLICATION = 120
EVENT_LOGGER_USER = 130
EVENT_LOGGER_REALTIME = 131
EVENT_LOGGER_PUBLISHER = 132
RING0_REALTIME = 200
RING0_TRACE = 290
RING0_IO = 300
RING0_PLC = 400  # legacy
RING0_NC = 500
RING0_NC_SAF = 501
RING0_NC_SVB = 511
NC_INSTANCE = 520
RING_ISG = 550
RING0_CNC = 600
RING0_LINE = 700
RING0_TC2_PLC = 800
TC2_PLC_SYSTEM1 = 801
TC2_PLC_SYSTEM2 = 811
TC2_PLC_SYSTEM3 = 821
TC2_PLC_SYSTEM4 = 831
RING0_TC3_PLC = 850
TC3_PLC_SYSTEM1 = 851
TC3_PLC_SYSTEM2 = 852
TC3_PLC_SYSTEM3 = 853
TC3_PLC_SYSTEM4 = 854  # and following
CAMSHAFT_CONTROLLER = 900
CAM_TOOL = 950
RING0_IO_PORTS = 1000  # to 1199
RING0_USER = 2000
CRESTRON_SERVER = 2500
SYSTEM_SERVICE = 10000
TCPIP_SERVER = 10201
SYSTEM_MANAGER = 10300
SMS_SERVER = 10400
MODBUS_SERVER = 10500
AMS_LOGGER = 10502
XML_DATA_SERVER = 10600
AUTO_CONFIG = 10700
PLC_CONTROL = 10800
FTP_CLIENT = 10900
NC_CONTROL = 11000
NC_INTERPRETER = 11500
GST_INTERPRETER = 11600
STRECKE_CONTROL = 12000
CAM_CONTROL = 13000
SCOPE_SERVER = 14000
COND_MONITORING = 14100
SINE_CH1 = 15000
CONTROL_NET = 16000
OPC_SERVER = 17000
OPC_CLIENT = 17500
MAIL_SERVER = 18000
VIRTUAL_COM = 19000
MGMT_SERVER = 19100
MIELE_HOME_SERVER = 19200
CP_LINK3 = 19300
VISION_SERVICE = 19500
MULTIUSER = 19600
DATABASE_SERVER = 21372
FIAS_SERVER = 25013
BANG_OLUFSEN_SERVER = 25015