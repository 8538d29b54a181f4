"""Catalog documents shared across the test suite.

Excerpts of a real Italian Bitcoin GUI catalog (Qt Linguist .ts, version 2.0).
"""

IT_CATALOG = """\
<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE TS>
<TS version="2.0" language="it">
<defaultcodec>UTF-8</defaultcodec>
<context>
    <name>AddressBookPage</name>
    <message>
        <location filename="../forms/addressbookpage.ui" line="+14"/>
        <source>Address Book</source>
        <translation>Rubrica</translation>
    </message>
    <message>
        <location filename="../addressbookpage.cpp" line="+274"/>
        <source>Error exporting</source>
        <translation>Errore nell&apos;esportazione</translation>
    </message>
    <message>
        <location line="+0"/>
        <source>Could not write to file %1.</source>
        <translation>Impossibile scrivere sul file %1.</translation>
    </message>
</context>
<context>
    <name>BitcoinGUI</name>
    <message>
        <location filename="../bitcoingui.cpp" line="+74"/>
        <source>&amp;Options...</source>
        <translation>&amp;Opzioni...</translation>
    </message>
    <message numerus="yes">
        <location line="+129"/>
        <source>%n active connection(s) to Bitcoin network</source>
        <translation>
            <numerusform>%n connessione attiva alla rete Bitcoin</numerusform>
            <numerusform>%n connessioni attive alla rete Bitcoin</numerusform>
        </translation>
    </message>
    <message numerus="yes">
        <location line="+15"/>
        <source>%n second(s) ago</source>
        <translation>
            <numerusform>%n secondo fa</numerusform>
            <numerusform>%n secondi fa</numerusform>
        </translation>
    </message>
    <message>
        <location line="+68"/>
        <source>Downloaded %1 of %2 blocks of transaction history.</source>
        <translation>Scaricati %1 dei %2 blocchi dello storico transazioni.</translation>
    </message>
    <message>
        <location line="+94"/>
        <source>Wallet is &lt;b&gt;encrypted&lt;/b&gt; and currently &lt;b&gt;unlocked&lt;/b&gt;</source>
        <translation>Il portamonete è &lt;b&gt;cifrato&lt;/b&gt; e attualmente &lt;b&gt;sbloccato&lt;/b&gt;</translation>
    </message>
    <message>
        <location filename="../bitcoin.cpp" line="+133"/>
        <source>A fatal error occurred. Bitcoin can no longer continue safely and will quit.</source>
        <translation type="unfinished"></translation>
    </message>
</context>
<context>
    <name>TransactionDesc</name>
    <message>
        <location filename="../transactiondesc.cpp" line="+21"/>
        <source>Open until %1</source>
        <translation>Aperto fino a %1</translation>
    </message>
    <message numerus="yes">
        <location line="+63"/>
        <source>Open for %n more block(s)</source>
        <translation type="unfinished">
            <numerusform></numerusform>
            <numerusform></numerusform>
        </translation>
    </message>
    <message>
        <location line="+3"/>
        <source>%1 confirmations</source>
        <translation>%1 conferme</translation>
    </message>
    <message>
        <source>Generated but not accepted</source>
        <translation type="obsolete">Generato ma non accettato</translation>
    </message>
</context>
</TS>
"""

CONNECTIONS = "%n active connection(s) to Bitcoin network"
