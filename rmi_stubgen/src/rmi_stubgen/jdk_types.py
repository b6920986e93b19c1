"""
Simple names of JDK types, for resolving Java sources without a classpath.

JAVA_LANG lists every public top-level type of java.lang (JDK 21), which is
imported implicitly. WELL_KNOWN_PACKAGES covers the packages service
interfaces usually pull in with `import pkg.*;`.
"""

JAVA_LANG = frozenset({
    # interfaces
    "Appendable", "AutoCloseable", "CharSequence", "Cloneable", "Comparable", "Iterable",
    "ProcessHandle", "Readable", "Runnable",
    # classes
    "Boolean", "Byte", "Character", "Class", "ClassLoader", "ClassValue", "Compiler", "Double",
    "Enum", "Float", "InheritableThreadLocal", "Integer", "Long", "Math", "Module",
    "ModuleLayer", "Number", "Object", "Package", "Process", "ProcessBuilder", "Record",
    "Runtime", "RuntimePermission", "ScopedValue", "SecurityManager", "Short",
    "StackTraceElement", "StackWalker", "StrictMath", "String", "StringBuffer",
    "StringBuilder", "System", "Thread", "ThreadGroup", "ThreadLocal", "Throwable", "Void",
    # exceptions
    "ArithmeticException", "ArrayIndexOutOfBoundsException", "ArrayStoreException",
    "ClassCastException", "ClassNotFoundException", "CloneNotSupportedException",
    "EnumConstantNotPresentException", "Exception", "IllegalAccessException",
    "IllegalArgumentException", "IllegalCallerException", "IllegalMonitorStateException",
    "IllegalStateException", "IllegalThreadStateException", "IndexOutOfBoundsException",
    "InstantiationException", "InterruptedException", "LayerInstantiationException",
    "MatchException", "NegativeArraySizeException", "NoSuchFieldException",
    "NoSuchMethodException", "NullPointerException", "NumberFormatException",
    "ReflectiveOperationException", "RuntimeException", "SecurityException",
    "StringIndexOutOfBoundsException", "TypeNotPresentException",
    "UnsupportedOperationException", "WrongThreadException",
    # errors
    "AbstractMethodError", "AssertionError", "BootstrapMethodError", "ClassCircularityError",
    "ClassFormatError", "Error", "ExceptionInInitializerError", "IllegalAccessError",
    "IncompatibleClassChangeError", "InstantiationError", "InternalError", "LinkageError",
    "NoClassDefFoundError", "NoSuchFieldError", "NoSuchMethodError", "OutOfMemoryError",
    "StackOverflowError", "ThreadDeath", "UnknownError", "UnsatisfiedLinkError",
    "UnsupportedClassVersionError", "VerifyError", "VirtualMachineError",
    # annotations
    "Deprecated", "FunctionalInterface", "Override", "SafeVarargs", "SuppressWarnings",
})

WELL_KNOWN_PACKAGES: dict[str, frozenset[str]] = {
    "java.util": frozenset({
        "AbstractList", "AbstractMap", "AbstractSet", "ArrayDeque", "ArrayList", "Arrays",
        "Base64", "BitSet", "Calendar", "Collection", "Collections", "Comparator",
        "ConcurrentModificationException", "Currency", "Date", "Deque", "Dictionary", "EnumMap",
        "EnumSet", "Enumeration", "EventListener", "EventObject", "GregorianCalendar", "HashMap",
        "HashSet", "Hashtable", "IdentityHashMap", "Iterator", "LinkedHashMap", "LinkedHashSet",
        "LinkedList", "List", "ListIterator", "Locale", "Map", "MissingResourceException",
        "NavigableMap", "NavigableSet", "NoSuchElementException", "Objects", "Optional",
        "OptionalDouble", "OptionalInt", "OptionalLong", "PriorityQueue", "Properties", "Queue",
        "Random", "ResourceBundle", "Scanner", "SequencedCollection", "SequencedMap",
        "SequencedSet", "Set", "SortedMap", "SortedSet", "Spliterator", "Stack", "StringJoiner",
        "TimeZone", "Timer", "TimerTask", "TreeMap", "TreeSet", "UUID", "Vector", "WeakHashMap",
    }),
    "java.io": frozenset({
        "BufferedInputStream", "BufferedOutputStream", "BufferedReader", "BufferedWriter",
        "ByteArrayInputStream", "ByteArrayOutputStream", "Closeable", "DataInput",
        "DataInputStream", "DataOutput", "DataOutputStream", "EOFException", "Externalizable",
        "File", "FileInputStream", "FileNotFoundException", "FileOutputStream", "FileReader",
        "FileWriter", "Flushable", "IOException", "InputStream", "InputStreamReader",
        "InterruptedIOException", "InvalidObjectException", "NotSerializableException",
        "ObjectInputStream", "ObjectOutputStream", "ObjectStreamException", "OutputStream",
        "OutputStreamWriter", "PrintStream", "PrintWriter", "Reader", "Serializable",
        "StringReader", "StringWriter", "UTFDataFormatException", "UncheckedIOException",
        "UnsupportedEncodingException", "Writer",
    }),
    "java.time": frozenset({
        "Clock", "DateTimeException", "DayOfWeek", "Duration", "Instant", "LocalDate",
        "LocalDateTime", "LocalTime", "Month", "MonthDay", "OffsetDateTime", "OffsetTime",
        "Period", "Year", "YearMonth", "ZoneId", "ZoneOffset", "ZonedDateTime",
    }),
    "java.math": frozenset({"BigDecimal", "BigInteger", "MathContext", "RoundingMode"}),
}
