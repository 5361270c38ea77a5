"""Application-wide names, settings keys and limits."""

APPNAME = "SceneExplorer"
APPVERSION = "1.22.49"

KEY_STYLE = "style"
KEY_LANGUAGE = "language"

KEY_GEOMETRY = "geometry"
KEY_WINDOWSTATE = "windowState"

KEY_SIZE = "size"
KEY_TREESIZE = "treesize"
KEY_TXTLOGSIZE = "txtlogsize"
KEY_LISTTASKSIZE = "listtasksize"

KEY_COMBO_FINDTEXTS = "combofindtexts"
KEY_SHOWMISSING = "showmissing"

KEY_TXTLOG_WRAP = "txtlogwrap"

KEY_LASTSELECTEDADDDIRECTORY = "lastselectedadddir"
KEY_LASTSELECTEDSCANDIRECTORY = "lastselectedscandir"
KEY_LASTSELECTEDDOCUMENT = "lastselecteddocumentdir"

KEY_USE_CUSTOMDATABASEDIR = "usecustomdatabasedir"
KEY_DATABASE_PATH = "databasepath"

KEY_MAX_GETDIR_THREADCOUNT = "maxgetdirthreadcount"
KEY_MAX_THUMBNAIL_THREADCOUNT = "maxthumbnailthreadcount"
KEY_THUMBNAIL_COUNT = "thumbcount"
KEY_THUMBNAIL_FORMAT = "thumbformat"
KEY_THUMBNAIL_WIDTH = "thumbwidth"
KEY_THUMBNAIL_HEIGHT = "thumbheight"
KEY_THUMBNAIL_SCROLLMODE = "thumbscrollmode"

KEY_TASK_PRIORITY = "taskpriority"

KEY_TAGMENU_FORMAT = "tagmenuformat"

KEY_TITLE_TEXT_TEMPLATE = "titletexttemplate"
KEY_INFO_TEXT_TEMPLATE = "infotexttemplate"

KEY_IMAGECACHETYPE = "imagecachetype"

KEY_EXTENSION_ORDERALLOW = "extensionoderallow"
KEY_EXTENSION_ORDERALLOW_DEFAULT = True

KEY_ALLOW_EXTENSIONS = "allowextensions"
KEY_DENY_EXTENSIONS = "denyextensions"

KEY_FONT_TABLEINFO = "fonttableinfo"
KEY_FONT_TABLEDETAIL = "fonttabledetail"
KEY_FONT_OUPUT = "fontoutput"
KEY_FONT_DIRECTORY = "fontdirectory"
KEY_FONT_TASK = "fonttask"
KEY_FONT_TAG = "fonttag"
KEY_FONT_MENU = "fontmenu"
KEY_FONT_STATUSBAR = "fontstatusbar"
KEY_FONT_DOCKINGWINDOW = "fontdockingwindow"

KEY_EXTERNALTOOLS_LASTSELECTEDEXEDIR = "externaltoolslastselectedexedir"
KEY_EXTERNALTOOLS_DIALOGGEOMETRY = "externaltoolsdialoggeometry"

KEY_EXTERNALTOOLS_COUNT = "externaltoolscount"
KEY_EXTERNALTOOLS_GROUPPRIX = "externaltool_"
KEY_EXTERNALTOOLS_NAME = "externaltoolname"
KEY_EXTERNALTOOLS_EXE = "externaltoolexe"
KEY_EXTERNALTOOLS_ARG = "externaltoolarg"
KEY_EXTERNALTOOLS_COUNTASOPEN = "externaltoolcountasopen"

KEY_OPTION_DIALOGGEOMETRY = "optiondialoggeometry"

KEY_RENAME_DIALOGGEOMETRY = "renamedialoggeometry"

KEY_RECENT_OPENDOCUMENTS = "recentdocuments"
KEY_SORT = "sort"
KEY_SORTREV = "sortrev"
KEY_SORTREV_DEFAULT = False

KEY_LIMIT_ITEMS = "limititems"
KEY_LIMIT_NUMBEROFROWS = "limitnumberofrows"

KEY_OPEN_LASTOPENEDDOCUMENT = "openlastdocument"
KEY_OPEN_LASTOPENEDDOCUMENT_DEFAULT = True
KEY_FFPROBE_EXECUTABLE = "ffprobeexecutable"
KEY_FFMPEG_EXECUTABLE = "ffmpegexecutable"

KEY_MESSAGEBOX_REMOVEFORMEXTERNALMEDIA = "mb_removefromexternalmedia"

KEY_SHOW_TAGCOUNT = "showtagcount"
KEY_SHOW_TAGCOUNT_DEFAULT = True

FILEPART_THUMBS = "thumbs"

THUMB_WIDTH_DEFAULT = 240
THUMB_HEIGHT_DEFAULT = 180

UUID_LENGTH = 36

DEFAULT_ITEM_MAIN_TEXT = "${name}"
DEFAULT_ITEM_SUB_TEXT = "${size}"

MAX_COMBOFIND_SAVECOUNT = 256

STR_ENV_SCENEEXPLORER_ROOT = "${SCENEEXPLORER_ROOT}"

FLOAT1000 = 1000.0
FLOAT1024 = 1024.0

FINDCOMBO_WIDTH = 140

MINIMUM_THREAD_COUNT = 1
MAXIMUM_THREAD_COUNT = 32


def clamp_thread_count(value: int) -> int:
    """Return *value* limited to the allowed range of worker threads."""
    return max(MINIMUM_THREAD_COUNT, min(MAXIMUM_THREAD_COUNT, value))