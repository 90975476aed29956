from dissect.cstruct import cstruct

dsstore_structure = cstruct(endian='>')
dsstore_structure.load("""
    // Entry of the table of contents that follows the padded allocation index
    struct TocEntry {
        uint8   nameLength;             // always 4 in practice
        char    name[4];                // "DSDB"
        uint32  blockId;                // logical index of the store header block
    };
""", compiled=True)
