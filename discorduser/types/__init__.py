"""Discord data types: IDs, colours, image hashes, timestamps, enums, flags, models and request payloads."""