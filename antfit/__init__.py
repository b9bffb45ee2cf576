__version__ = '0.1.0'

from antfit._messages import (DataMessage, Message, MESSAGE_CLASSES,
                              MESSAGE_CLASSES_BY_NAME, UnknownMessage,
                              decode_message)
from antfit._protocol import (Definition, FieldDefinition, FitFile,
                              FitHeader, LocalTypeTable, decode,
                              gen_fit_messages, open_fit)
from antfit._reading import gen_records, read
from antfit._types import DecodedFile, FitFrame
from antfit._util.exceptions import (CRCError, FITError, FileHeaderError,
                                     FormatError, InvalidFileError,
                                     ReadError, UnknownLocalTypeError)
